"""Configuration pytest: rend le paquet kmpp importable depuis la racine du dépôt."""
