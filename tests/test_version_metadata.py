"""Version metadata consistency tests."""

from importlib.metadata import PackageNotFoundError, version

import islm_calculator as islm


def test_dunder_version_matches_distribution_metadata() -> None:
    """__version__ と配布メタデータの整合性を保証する。"""
    try:
        dist_version = version("islm-calc")
    except PackageNotFoundError:
        assert islm.__version__ == "0+unknown"
        return

    assert islm.__version__ == dist_version
