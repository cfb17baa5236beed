import itertools

import pytest

from models.asset_resolver import AssetResolver, ResolutionStatus, asset_key
from models.selection_model import Selection


@pytest.mark.parametrize("order", list(itertools.permutations((2, 0, 4))))
def test_asset_key_is_order_independent(order):
    assert asset_key(order) == "024"


def test_asset_key_example():
    assert asset_key([0, 1, 2]) == "012"
    assert asset_key({6, 5, 4}) == "456"


@pytest.mark.parametrize("ids", [(), (1,), (1, 2), (0, 1, 2, 3)])
def test_asset_key_requires_three_ids(ids):
    with pytest.raises(ValueError):
        asset_key(ids)


def test_diagram_path(tmp_path):
    resolver = AssetResolver(tmp_path)
    assert resolver.diagram_path("135") == tmp_path / "diagrams" / "135.png"


@pytest.mark.parametrize("ids", [(), (0,), (0, 1)])
def test_incomplete_selection_is_placeholder(resolver, ids):
    resolution = resolver.resolve(Selection(ids))
    assert resolution.status is ResolutionStatus.PLACEHOLDER
    assert resolution.message == "Select exactly 3 species to view the diagram"
    assert resolution.key is None


def test_existing_diagram_is_found(resolver, asset_root):
    resolution = resolver.resolve(Selection((2, 1, 0)))
    assert resolution.status is ResolutionStatus.FOUND
    assert resolution.key == "012"
    assert resolution.path == asset_root / "diagrams" / "012.png"
    assert resolution.alt_text == "Diagram for species 0, 1, 2"


def test_missing_diagram_is_not_found(resolver):
    resolution = resolver.resolve(Selection((3, 1, 5)))
    assert resolution.status is ResolutionStatus.NOT_FOUND
    assert resolution.key == "135"
    assert resolution.message == "Diagram not found for selected species"


def test_directory_named_like_diagram_is_not_found(resolver, asset_root):
    (asset_root / "diagrams" / "345.png").mkdir()
    resolution = resolver.resolve(Selection((3, 4, 5)))
    assert resolution.status is ResolutionStatus.NOT_FOUND
