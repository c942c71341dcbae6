"""Option definition models and declaration file loading."""
