"""Build data codec unit tests."""

from __future__ import annotations

import json
from decimal import Decimal

import pytest

from chopper.builds.build_data import (
    BuildData,
    PartSelection,
    StyleSelection,
    compute_total,
    decode_build_data,
    encode_build_data,
    progress_percent,
    with_part,
)


def _part(part_id: int, category_id: int, price: str) -> PartSelection:
    return PartSelection(id=part_id, name=f"Part {part_id}", category_id=category_id, price=Decimal(price))


class TestComputeTotal:
    def test_empty(self) -> None:
        assert compute_total({}) == Decimal("0.00")

    def test_sums_without_float_drift(self) -> None:
        parts = {1: _part(1, 1, "0.10"), 2: _part(2, 2, "0.20")}
        assert compute_total(parts) == Decimal("0.30")


class TestWithPart:
    def test_adds_part_and_updates_total(self) -> None:
        data = with_part(BuildData(), _part(7, 3, "249.99"))
        assert list(data.parts) == [3]
        assert data.total_price == Decimal("249.99")

    def test_replaces_part_in_same_category(self) -> None:
        data = with_part(BuildData(), _part(7, 3, "249.99"))
        data = with_part(data, _part(8, 3, "99.50"))
        assert data.parts[3].id == 8
        assert data.total_price == Decimal("99.50")

    def test_does_not_mutate_input(self) -> None:
        original = BuildData()
        with_part(original, _part(1, 1, "10"))
        assert original.parts == {}


class TestCodec:
    def test_wire_format(self) -> None:
        """Encoded form uses the frontend's keys and numeric prices."""
        data = with_part(BuildData(style=StyleSelection(id=1, name="Bobber")), _part(7, 3, "249.99"))
        raw = json.loads(encode_build_data(data))
        assert raw["style"] == {"id": 1, "name": "Bobber"}
        assert raw["parts"]["3"]["price"] == 249.99
        assert raw["totalPrice"] == 249.99

    def test_decode_frontend_blob(self) -> None:
        """Blobs written by the configurator (full part rows, extra keys) decode."""
        blob = json.dumps({
            "style": {"id": 2, "name": "Old School", "description": "Springer", "image_url": None},
            "parts": {
                "5": {"id": 11, "name": "Peanut Tank", "category_id": 5, "price": 320.0, "description": "2.2 gal"},
            },
            "totalPrice": 320.0,
        })
        data = decode_build_data(blob)
        assert data.style is not None
        assert data.style.name == "Old School"
        assert data.parts[5].name == "Peanut Tank"
        assert data.total_price == Decimal("320")

    def test_decode_empty_object(self) -> None:
        data = decode_build_data("{}")
        assert data.style is None
        assert data.parts == {}
        assert data.total_price == Decimal("0")

    @pytest.mark.parametrize("raw", ["not json", "[]", '{"parts": {"x": 1}}'])
    def test_decode_invalid(self, raw: str) -> None:
        with pytest.raises(ValueError, match="Invalid build data"):
            decode_build_data(raw)


class TestProgressPercent:
    @pytest.mark.parametrize(
        ("step", "expected"),
        [(0, 0.0), (3, 30.0), (10, 100.0), (15, 100.0)],
    )
    def test_default_denominator(self, step: int, expected: float) -> None:
        assert progress_percent(step) == pytest.approx(expected)

    def test_custom_denominator(self) -> None:
        assert progress_percent(1, total_steps=4) == 25.0

    def test_zero_denominator_rejected(self) -> None:
        with pytest.raises(ValueError, match="total_steps must be positive"):
            progress_percent(1, total_steps=0)
