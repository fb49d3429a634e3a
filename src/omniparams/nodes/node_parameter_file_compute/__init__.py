# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""ParameterFileCompute: parse and render ROS 2 style parameter files."""
