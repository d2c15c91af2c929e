"""
web - Веб-интерфейс Klotski Solver (Flask).
"""
