"""
Batch analysis pipelines for the NYPD Shooting Incident (Historic) dataset.
"""
