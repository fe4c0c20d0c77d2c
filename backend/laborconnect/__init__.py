"""
LaborConnect: worker/employer marketplace API with a global chat relay
"""
__version__ = "1.0.0"
