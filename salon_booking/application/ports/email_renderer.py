from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class RenderedEmail:
    subject: str
    html: str
    text: str


class EmailRendererPort(ABC):
    @abstractmethod
    def render(self, template: str, context: dict[str, Any]) -> RenderedEmail:
        raise NotImplementedError
