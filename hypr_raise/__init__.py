"""
hypr-raise - run-or-raise window activation for Hyprland
"""
__version__ = "0.1.0"
