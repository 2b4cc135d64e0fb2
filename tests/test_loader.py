from pathlib import Path

import pytest

from swagger_docgen.config import DocumentationConfig, load_config, parse_config
from swagger_docgen.errors import ConfigError, RouteFileError
from swagger_docgen.routes.loader import load_catalog, load_index, load_routes, parse_routes

FIXTURES = Path(__file__).parent / "fixtures"


class TestLoadRoutes:
    def test_routes_in_file_order(self):
        routes = load_routes(FIXTURES / "shop.yaml")
        assert [(r.method, r.path) for r in routes] == [
            ("GET", "/orders(.:format)"),
            ("POST", "/orders/:id(.:format)"),
            ("GET", "/Users/:id(.:format)"),
            ("GET", "/(.:format)"),
        ]

    def test_route_fields(self):
        route = load_routes(FIXTURES / "shop.yaml")[1]
        assert route.params["id"].description == "Order id"
        assert route.params["id"].required is True
        assert route.http_codes == {404: "Order not found", 422: "Invalid order"}
        assert route.notes.startswith("Replaces the order.")

    def test_index_skips_unkeyed_routes(self):
        index = load_index(FIXTURES / "shop.yaml")
        assert index.keys() == ["orders", "users"]
        assert not index.frozen

    def test_json_file(self, tmp_path):
        f = tmp_path / "routes.json"
        f.write_text('{"routes": [{"method": "get", "path": "/pets"}]}')
        assert load_routes(f)[0].method == "GET"

    def test_empty_file(self, tmp_path):
        f = tmp_path / "empty.yaml"
        f.write_text("")
        assert load_routes(f) == []

    def test_invalid_yaml(self, tmp_path):
        f = tmp_path / "bad.yaml"
        f.write_text("routes: [unclosed")
        with pytest.raises(RouteFileError):
            load_routes(f)

    def test_top_level_list(self, tmp_path):
        f = tmp_path / "list.yaml"
        f.write_text("- a\n- b\n")
        with pytest.raises(RouteFileError):
            load_routes(f)

    def test_route_missing_path(self):
        with pytest.raises(RouteFileError, match="route #2"):
            parse_routes([{"method": "GET", "path": "/a"}, {"method": "GET"}])

    def test_route_not_a_mapping(self):
        with pytest.raises(RouteFileError, match="route #1"):
            parse_routes(["GET /a"])


class TestLoadCatalog:
    def test_entities(self):
        catalog = load_catalog(FIXTURES / "shop.yaml")
        assert len(catalog) == 2
        assert catalog.resolve("Order").name == "shop.entities.Order"
        assert catalog.resolve("LineItem").exposures["quantity"].type == "Integer"

    def test_no_entities(self, tmp_path):
        f = tmp_path / "routes.yaml"
        f.write_text("routes: []\n")
        assert len(load_catalog(f)) == 0


class TestConfig:
    def test_defaults(self):
        config = DocumentationConfig()
        assert config.mount_path == "/swagger_doc"
        assert config.base_path is None
        assert config.api_version == "0.1"
        assert config.markdown is False
        assert config.hide_documentation_path is False

    def test_load_from_route_file(self):
        config = load_config(FIXTURES / "shop.yaml")
        assert config.api_version == "1.0"
        assert config.base_path == "http://shop.example.com"
        assert config.markdown is True

    def test_missing_section(self, tmp_path):
        f = tmp_path / "routes.yaml"
        f.write_text("routes: []\n")
        assert load_config(f) == DocumentationConfig()

    def test_unknown_option(self):
        with pytest.raises(ConfigError):
            parse_config({"mount_pth": "/docs"})

    def test_section_not_a_mapping(self):
        with pytest.raises(ConfigError):
            parse_config(["/docs"])

    def test_overrides_skip_none(self):
        config = DocumentationConfig(api_version="2.0").with_overrides(api_version=None, markdown=True)
        assert config.api_version == "2.0"
        assert config.markdown is True

    def test_mount_path_trailing_slash_dropped(self):
        assert DocumentationConfig(mount_path="/docs/").mount_path == "/docs"

    def test_mount_path_needs_a_segment(self):
        for bad in ("/", "", "docs"):
            with pytest.raises(ConfigError):
                parse_config({"mount_path": bad})
