"""aco_draw.core — Foundation layer.

Contains the byte helpers, type definitions, error taxonomy, .aco parser,
renderer and report builder.
This module has NO dependencies on aco_draw.spaces except through
aco_draw.registry, which the parser looks decoders up in.
Only stdlib, numpy, and PIL are allowed here.
"""
