"""
Worker module: anganwadi staff and ASHA community health workers.
"""
