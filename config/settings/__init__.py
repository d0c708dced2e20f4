"""Settings package for the fleet rental project.

`base.py` contains configuration shared by every environment. `dev.py`
and `prod.py` extend it with environment specific overrides.
"""
