# cli/__init__.py
# ============================================================
# Command line entry point package (see cli.main).
# ============================================================
