"""Command-line interface for CLINICFLOW."""
