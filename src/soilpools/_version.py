
# Read by setup.py, bump here when releasing

__version__ = '1.0.0'
