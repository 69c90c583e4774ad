# pagebinder/render/__init__.py
# ============================================================
# Rendering Package
# ============================================================
# RenderSurface: drawing primitives the composer relies on.
# ReportLabSurface: the PDF implementation over ReportLab.
# ============================================================

from pagebinder.render.surface import RenderSurface, ReportLabSurface

__all__ = ["RenderSurface", "ReportLabSurface"]
