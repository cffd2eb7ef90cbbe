"""Base classes for esxml node models."""

from __future__ import annotations

from pydantic import BaseModel


class NodeBase(BaseModel):
    """Base class for all validated esxml nodes.

    Every node carries a ``kind`` literal used as the discriminator of the
    ``Node`` union. Nodes are only built from input that already passed
    ``parse_esxml``, so the models describe shape rather than police it.
    """

    kind: str

    model_config = {
        "extra": "forbid",
        "frozen": True,
    }


__all__ = ["NodeBase"]
