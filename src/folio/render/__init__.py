"""Rendering through the templating collaborator."""

from folio.render.adapter import BUNDLED_TEMPLATE_DIR, RendererAdapter

__all__ = ["BUNDLED_TEMPLATE_DIR", "RendererAdapter"]
