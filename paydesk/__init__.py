"""Payment instruction processing service."""
