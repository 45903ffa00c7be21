"""Tests for deeplink.template — immutable builder, rendering, URL building."""

import pytest

from deeplink.errors import BuildError, ConfigurationError
from deeplink.params import ValueKind
from deeplink.template import (
    Capture,
    QueryParam,
    Template,
    Term,
    optional_bool,
    optional_float,
    optional_int,
    optional_str,
    required_bool,
    required_float,
    required_int,
    required_str,
)


class TestBuilder:
    def test_empty(self) -> None:
        template = Template()
        assert template.parts == ()
        assert template.params == ()

    def test_parts_in_call_order(self) -> None:
        template = Template().term("select").term("tab").int("index")
        assert template.parts == (
            Term("select"),
            Term("tab"),
            Capture("index", ValueKind.INT),
        )

    def test_every_capture_kind(self) -> None:
        template = Template().string("s").int("i").double("d").bool("b")
        assert [p.kind for p in template.parts] == [  # type: ignore[union-attr]
            ValueKind.STR,
            ValueKind.INT,
            ValueKind.FLOAT,
            ValueKind.BOOL,
        ]

    def test_long_names_alias_short_ones(self) -> None:
        assert Template().integer("n") == Template().int("n")
        assert Template().boolean("b") == Template().bool("b")

    def test_builder_does_not_mutate(self) -> None:
        base = Template().term("show")
        photo = base.term("photo")
        video = base.term("video")

        assert base.parts == (Term("show"),)
        assert photo.parts == (Term("show"), Term("photo"))
        assert video.parts == (Term("show"), Term("video"))

    def test_query_replaces_wholesale(self) -> None:
        template = Template().query(required_int("a")).query(optional_str("b"))
        assert template.params == (optional_str("b"),)

    def test_query_keeps_path(self) -> None:
        template = Template().term("x").query(required_int("a"))
        assert template.parts == (Term("x"),)

    def test_path_after_query_keeps_params(self) -> None:
        template = Template().query(required_int("a")).term("x")
        assert template.params == (required_int("a"),)

    def test_frozen(self) -> None:
        template = Template()
        with pytest.raises(AttributeError):
            template.parts = ()  # type: ignore[misc]

    def test_equal_templates_hash_equal(self) -> None:
        a = Template().term("a").query(required_str("q"))
        b = Template().term("a").query(required_str("q"))
        assert a == b
        assert hash(a) == hash(b)

    def test_parameters_by_name(self) -> None:
        template = Template().query(required_bool("accept"), optional_str("user"))
        assert template.parameters == {
            "accept": QueryParam("accept", ValueKind.BOOL, required=True),
            "user": QueryParam("user", ValueKind.STR, required=False),
        }

    def test_capture_names(self) -> None:
        template = Template().term("a").string("x").int("y")
        assert template.capture_names == ("x", "y")


class TestBuilderValidation:
    def test_duplicate_query_names(self) -> None:
        with pytest.raises(ConfigurationError, match="Duplicate query parameter"):
            Template().query(required_int("n"), optional_str("n"))

    def test_duplicate_capture_names(self) -> None:
        with pytest.raises(ConfigurationError, match="Duplicate path capture"):
            Template().string("n").int("n")

    def test_same_name_in_path_and_query_allowed(self) -> None:
        template = Template().string("n").query(required_str("n"))
        assert template.capture_names == ("n",)

    def test_empty_term(self) -> None:
        with pytest.raises(ConfigurationError):
            Template().term("")

    def test_empty_capture_name(self) -> None:
        with pytest.raises(ConfigurationError):
            Template().int("")

    def test_empty_query_name(self) -> None:
        with pytest.raises(ConfigurationError):
            required_str("")

    @pytest.mark.parametrize("name", ["a&b", "a=b", "a#b"])
    def test_reserved_query_name(self, name: str) -> None:
        with pytest.raises(ConfigurationError):
            optional_int(name)


class TestQueryParamFactories:
    @pytest.mark.parametrize(
        ("factory", "kind", "required"),
        [
            (required_int, ValueKind.INT, True),
            (optional_int, ValueKind.INT, False),
            (required_bool, ValueKind.BOOL, True),
            (optional_bool, ValueKind.BOOL, False),
            (required_float, ValueKind.FLOAT, True),
            (optional_float, ValueKind.FLOAT, False),
            (required_str, ValueKind.STR, True),
            (optional_str, ValueKind.STR, False),
        ],
    )
    def test_factory(self, factory, kind: ValueKind, required: bool) -> None:
        param = factory("p")
        assert param.name == "p"
        assert param.kind is kind
        assert param.required is required


class TestStr:
    def test_path_only(self) -> None:
        assert str(Template().term("select").term("tab").int("index")) == "select/tab/{index:int}"

    def test_with_query(self) -> None:
        template = (
            Template()
            .term("display")
            .string("type")
            .query(optional_str("user"), required_bool("accept"))
        )
        assert str(template) == "display/{type:str}?{user:str?}&{accept:bool}"

    def test_empty(self) -> None:
        assert str(Template()) == ""


class TestBuildURL:
    def test_terms_and_captures(self) -> None:
        template = Template().term("select").term("tab").int("index")
        assert template.build_url("app", path={"index": 1}) == "app://select/tab/1"

    def test_query_in_declared_order(self) -> None:
        template = Template().term("display").string("type").query(
            optional_str("user"), required_bool("accept")
        )
        url = template.build_url(
            "app", path={"type": "upgrade"}, query={"accept": True, "user": "Billy Bob"}
        )
        assert url == "app://display/upgrade?user=Billy%20Bob&accept=true"

    def test_optional_omitted(self) -> None:
        template = Template().term("a").query(optional_int("n"))
        assert template.build_url("app") == "app://a"

    def test_fragment(self) -> None:
        template = Template().term("a")
        assert template.build_url("app", fragment="top") == "app://a#top"

    def test_string_escaping(self) -> None:
        template = Template().string("s")
        assert template.build_url("app", path={"s": "a/b c"}) == "app://a%2Fb%20c"

    def test_numbers_not_escaped_in_query(self) -> None:
        template = Template().term("z").query(required_float("x"), required_int("n"))
        url = template.build_url("app", query={"x": 1e16, "n": -4})
        assert url == "app://z?x=1e+16&n=-4"

    def test_float_accepts_int(self) -> None:
        template = Template().double("x")
        assert template.build_url("app", path={"x": 2}) == "app://2.0"

    def test_missing_capture(self) -> None:
        with pytest.raises(BuildError, match="Missing path value"):
            Template().int("n").build_url("app")

    def test_missing_required_query(self) -> None:
        with pytest.raises(BuildError, match="Missing required query value"):
            Template().query(required_str("name")).build_url("app")

    def test_wrong_kind(self) -> None:
        with pytest.raises(BuildError, match="must be int"):
            Template().int("n").build_url("app", path={"n": "seven"})

    def test_bool_is_not_int(self) -> None:
        with pytest.raises(BuildError):
            Template().int("n").build_url("app", path={"n": True})

    def test_unknown_names(self) -> None:
        with pytest.raises(BuildError, match="Unknown path values"):
            Template().term("a").build_url("app", path={"x": 1})
        with pytest.raises(BuildError, match="Unknown query values"):
            Template().term("a").build_url("app", query={"x": 1})

    def test_empty_string_segment(self) -> None:
        with pytest.raises(BuildError, match="empty segment"):
            Template().string("s").build_url("app", path={"s": ""})
