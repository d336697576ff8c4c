"""CLINICFLOW

Domain model and use cases for clinical workflows: clinics, the patients
registered with them, and the biological samples collected from those
patients. Business rules live in the domain; storage and the command line
are adapters around it.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
