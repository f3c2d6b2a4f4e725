from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..services import ServiceContext


@dataclass(slots=True)
class ApiState:
    context: ServiceContext = field(default_factory=ServiceContext)

    def reset(self, context: Optional[ServiceContext] = None) -> ServiceContext:
        self.context = context or ServiceContext()
        return self.context


api_state = ApiState()
