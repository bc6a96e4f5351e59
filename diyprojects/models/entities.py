# Rev 0.2.0
"""Lightweight entities aligned with the projects schema (project, material, step, category)"""
from __future__ import annotations
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional


@dataclass
class Material:
    material_id: int | None
    project_id: int
    material_name: str
    num_required: Optional[int] = None
    cost: Optional[Decimal] = None

    def __str__(self) -> str:
        return f"{self.material_name} (x{self.num_required or 0}, cost={self.cost})"


@dataclass
class Step:
    step_id: int | None
    project_id: int
    step_text: str
    step_order: int = 0

    def __str__(self) -> str:
        return f"{self.step_order}. {self.step_text}"


@dataclass
class Category:
    category_id: int | None
    category_name: str

    def __str__(self) -> str:
        return self.category_name


@dataclass
class Project:
    project_id: int | None
    project_name: str
    estimated_hours: Optional[Decimal] = None   # scale 2
    actual_hours: Optional[Decimal] = None      # scale 2
    difficulty: Optional[int] = None            # 1..5
    notes: Optional[str] = None
    # children are only populated by a fetch-by-id
    materials: List[Material] = field(default_factory=list)
    steps: List[Step] = field(default_factory=list)
    categories: List[Category] = field(default_factory=list)

    def details(self) -> str:
        """Multi-line block used by the 'view' menu action."""
        lines = [
            f"   ID={self.project_id}",
            f"   name={self.project_name}",
            f"   estimatedHours={self.estimated_hours}",
            f"   actualHours={self.actual_hours}",
            f"   difficulty={self.difficulty}",
            f"   notes={self.notes}",
            "",
            "   Materials:",
        ]
        lines.extend(f"      {m}" for m in self.materials)
        lines += ["", "   Steps:"]
        lines.extend(f"      {s}" for s in self.steps)
        lines += ["", "   Categories:"]
        lines.extend(f"      {c}" for c in self.categories)
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.details()


TWO_PLACES = Decimal("0.01")


def two_places(value) -> Optional[Decimal]:
    """Normalize a store or user value to a scale-2 Decimal (None stays None)."""
    if value is None:
        return None
    return Decimal(str(value)).quantize(TWO_PLACES)
