from swagger_docgen.routes.base import ParameterSpec, RouteDescriptor


class TestParameterSpec:
    def test_defaults(self):
        spec = ParameterSpec()
        assert spec.type is None
        assert spec.description == ""
        assert spec.required is False
        assert spec.full_name is None

    def test_from_raw_reads_desc_alias(self):
        spec = ParameterSpec.from_raw({"type": "Integer", "desc": "User id", "required": True})
        assert spec.type == "Integer"
        assert spec.description == "User id"
        assert spec.required is True

    def test_from_raw_reads_description_and_full_name(self):
        spec = ParameterSpec.from_raw({"description": "Street", "full_name": "address[street]"})
        assert spec.description == "Street"
        assert spec.full_name == "address[street]"

    def test_from_raw_non_mapping_gives_defaults(self):
        assert ParameterSpec.from_raw("Integer") == ParameterSpec()
        assert ParameterSpec.from_raw(None) == ParameterSpec()
        assert ParameterSpec.from_raw(42) == ParameterSpec()

    def test_from_raw_coerces_loose_values(self):
        spec = ParameterSpec.from_raw({"type": 5, "desc": None, "required": "yes"})
        assert spec.type == "5"
        assert spec.description == ""
        assert spec.required is True

    def test_from_raw_missing_required_is_false(self):
        assert ParameterSpec.from_raw({"type": "String"}).required is False


class TestRouteDescriptor:
    def test_minimal_route(self):
        route = RouteDescriptor(method="get", path="/users")
        assert route.method == "GET"
        assert route.params == {}
        assert route.headers == {}
        assert route.http_codes == {}
        assert route.notes is None
        assert route.version is None

    def test_params_normalized_at_ingestion(self):
        route = RouteDescriptor(
            method="POST",
            path="/users",
            params={"name": {"type": "String", "desc": "Name"}, "tag": "not a hash"},
        )
        assert route.params["name"].description == "Name"
        assert route.params["tag"] == ParameterSpec()

    def test_absent_params_are_empty(self):
        route = RouteDescriptor(method="GET", path="/users", params=None, headers=None)
        assert route.params == {}
        assert route.headers == {}

    def test_param_name_list(self):
        route = RouteDescriptor(method="GET", path="/users", params=["page", "per_page"])
        assert list(route.params) == ["page", "per_page"]

    def test_param_order_preserved(self):
        route = RouteDescriptor(method="GET", path="/users", params={"b": {}, "a": {}, "c": {}})
        assert list(route.params) == ["b", "a", "c"]

    def test_version_coerced_to_string(self):
        route = RouteDescriptor(method="GET", path="/:version/users", version=2)
        assert route.version == "2"

    def test_equal_routes_compare_equal(self):
        a = RouteDescriptor(method="GET", path="/users", params={"id": {"type": "Integer"}})
        b = RouteDescriptor(method="get", path="/users", params={"id": {"type": "Integer"}})
        assert a == b
