"""HTTP helpers shared by all blueprints."""
