"""
Anganwadi module: community outreach centers that workers are attached to.
"""
