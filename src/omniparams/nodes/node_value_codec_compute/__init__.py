# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""ValueCodecCompute: pure conversion between ParameterValue and edit text."""
