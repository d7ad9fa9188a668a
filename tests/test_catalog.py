"""
Tests for the read-only star catalog.
"""

import pytest
import yaml

from relcalc.catalog import Star, StarCatalog


def test_lookup_by_exact_name(catalog):
    star = catalog.get('Betelgeuse')
    assert star == Star('Betelgeuse', 550.0)
    assert 'Betelgeuse' in catalog


def test_lookup_is_case_sensitive(catalog):
    assert catalog.get('betelgeuse') is None
    assert 'betelgeuse' not in catalog


def test_missing_star(catalog):
    assert catalog.get('Vulcan') is None


def test_names_sorted(catalog):
    assert catalog.names() == ['Betelgeuse', 'Proxima Centauri', 'Rigel']
    assert len(catalog) == 3
    assert {star.name for star in catalog} == set(catalog.names())


def test_duplicate_names_rejected():
    with pytest.raises(ValueError, match='Duplicate'):
        StarCatalog([Star('Sirius', 8.6), Star('Sirius', 8.7)])


@pytest.mark.parametrize("name", ['', 'x' * 101])
def test_name_length(name):
    with pytest.raises(ValueError, match='between 1 and 100'):
        StarCatalog([Star(name, 1.0)])


@pytest.mark.parametrize("distance", [0.0, -4.2, float('nan')])
def test_distance_must_be_positive(distance):
    with pytest.raises(ValueError, match='distance'):
        StarCatalog([Star('Nowhere', distance)])


def test_load_shipped_catalog(default_config_path):
    catalog = StarCatalog.from_yaml(str(default_config_path.parent / 'stars.yaml'))
    assert len(catalog) >= 5
    assert catalog.get('Proxima Centauri').distance_ly == 4.2
    assert catalog.get('Rigel').distance_ly == 863.0


def test_load_from_yaml(tmp_path):
    path = tmp_path / 'stars.yaml'
    with open(path, 'w') as f:
        yaml.dump({'stars': [{'name': 'Vega', 'distance_ly': '25.04'}]}, f)

    catalog = StarCatalog.from_yaml(str(path))
    assert catalog.get('Vega').distance_ly == 25.04


def test_empty_catalog_file(tmp_path):
    path = tmp_path / 'stars.yaml'
    path.write_text('')
    assert len(StarCatalog.from_yaml(str(path))) == 0


def test_malformed_entry(tmp_path):
    path = tmp_path / 'stars.yaml'
    with open(path, 'w') as f:
        yaml.dump({'stars': [{'name': 'Vega'}]}, f)

    with pytest.raises(ValueError, match='distance_ly'):
        StarCatalog.from_yaml(str(path))


def test_non_numeric_distance(tmp_path):
    path = tmp_path / 'stars.yaml'
    with open(path, 'w') as f:
        yaml.dump({'stars': [{'name': 'Vega', 'distance_ly': 'far'}]}, f)

    with pytest.raises(ValueError, match='must be a number'):
        StarCatalog.from_yaml(str(path))


def test_boolean_distance_rejected(tmp_path):
    path = tmp_path / 'stars.yaml'
    with open(path, 'w') as f:
        yaml.dump({'stars': [{'name': 'Vega', 'distance_ly': True}]}, f)

    with pytest.raises(ValueError, match='must be a number'):
        StarCatalog.from_yaml(str(path))


def test_catalog_must_be_mapping(tmp_path):
    path = tmp_path / 'stars.yaml'
    path.write_text('- name: Vega\n  distance_ly: 25.04\n')

    with pytest.raises(ValueError, match='mapping'):
        StarCatalog.from_yaml(str(path))


def test_catalog_file_not_found():
    with pytest.raises(FileNotFoundError):
        StarCatalog.from_yaml('no_such_catalog.yaml')
