"""Version information for XORCrack"""
__version__ = "1.0.0"
