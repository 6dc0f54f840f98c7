"""
Medical record module: append-only clinical observations per patient.
"""
