"""
HTTP API for nn_infer.
"""
