"""OmniParams nodes.

Each node is a package with ``handlers/`` (the behavior), ``models/`` (its
inputs and outputs) and ``node_tests/``:

    node_value_codec_compute     ParameterValue <-> edit text
    node_parameter_file_compute  parameter file parsing and rendering
    node_parameter_sync_effect   remote list / fetch / stage / commit
"""
