"""Parse URDF robot descriptions and world files into Python objects.

Modules: common, pose, link, joint, sensor, model_state, model, world, check.
"""

__version__ = "0.1.0"