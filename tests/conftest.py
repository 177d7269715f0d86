"""Pytest configuration and fixtures."""

import json

import pytest


@pytest.fixture
def temp_dir(tmp_path):
    """Temporary directory for tests."""
    return tmp_path


@pytest.fixture
def sample_links():
    """Link list as returned by a collection endpoint."""
    return [
        {"href": "https://api.example.com/collections/S2", "rel": "self", "type": "application/json"},
        {"href": "https://www.example.org/license/", "rel": "license"},
        {"href": "https://api.example.com/collections", "rel": "parent", "title": "All collections"},
        {"href": "https://example.com/about", "rel": "about", "title": ""},
        {"href": "http://www.example.net/docs/"},
    ]


@pytest.fixture
def sample_process_graph():
    """Small process graph, a typical nested payload."""
    return {
        "process_graph": {
            "load": {
                "process_id": "load_collection",
                "arguments": {
                    "id": "SENTINEL2",
                    "spatial_extent": {"west": 16.1, "east": 16.6, "north": 48.6, "south": 47.2},
                    "bands": ["B04", "B08"],
                },
            },
            "save": {
                "process_id": "save_result",
                "arguments": {"data": {"from_node": "load"}, "format": "GTiff"},
                "result": True,
            },
        },
        "parameters": [],
        "deprecated": False,
        "summary": None,
    }


@pytest.fixture
def links_file(temp_dir, sample_links):
    """JSON file holding an API object with a links member."""
    path = temp_dir / "collection.json"
    path.write_text(json.dumps({"id": "S2", "links": sample_links}), encoding='utf-8')
    return path
