"""Setup and maintenance tooling for a Hyprland dotfiles deployment."""

__version__ = "0.3.0"
