"""
Bed module: hospitals, beds, and the bed-assignment coordinator that keeps
Bed.patient_id and Patient.bed_id consistent.
"""
