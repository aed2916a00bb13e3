"""
SoloSphere marketplace backend.
"""
