import pytest

from hiccupgen import InvalidTag, normalize_tree


def test_single_element_shorthand():
    assert normalize_tree(["div", "foo"]) == ["div", {}, "foo"]
    assert normalize_tree(["div#foo", "foo"]) == ["div", {"id": "foo"}, "foo"]
    assert normalize_tree(["div#foo.bar.baz", "foo"]) == [
        "div",
        {"id": "foo", "class": "bar baz"},
        "foo",
    ]
    assert normalize_tree(["div#foo.bar.baz", {"extra": 23}, "foo"]) == [
        "div",
        {"id": "foo", "class": "bar baz", "extra": 23},
        "foo",
    ]


def test_element_without_children_has_two_slots():
    assert normalize_tree(["br"]) == ["br", {}]
    assert normalize_tree(["div.box", {"title": "x"}]) == [
        "div",
        {"class": "box", "title": "x"},
    ]


def test_explicit_attributes_override_shorthand():
    norm = normalize_tree(["div#a.b", {"id": "x", "class": "y"}])
    assert norm == ["div", {"id": "x", "class": "y"}]


@pytest.mark.parametrize(
    "style, expected",
    [
        ({"a": "red"}, "a:red;"),
        ({"a": "red", "b": "blue"}, "a:red;b:blue;"),
        ("a:red;", "a:red;"),
        ({}, ""),
    ],
)
def test_style_mapping_is_flattened(style, expected):
    assert normalize_tree(["div", {"style": style}, "foo"]) == [
        "div",
        {"style": expected},
        "foo",
    ]


def test_input_attributes_are_not_mutated():
    attrs = {"style": {"color": "red"}}
    norm = normalize_tree(["p", attrs])
    assert attrs == {"style": {"color": "red"}}
    assert norm[1] is not attrs


def test_simple_nested():
    assert normalize_tree(
        ["div", ["h1.title", "foo"], ["p", ["span.small", "hello"], ["br"], "bye"]]
    ) == [
        "div",
        {},
        ["h1", {"class": "title"}, "foo"],
        ["p", {}, ["span", {"class": "small"}, "hello"], ["br", {}], "bye"],
    ]


def test_none_children_are_dropped():
    assert normalize_tree(["div", None, "a", None, [lambda: None]]) == ["div", {}, "a"]


def test_components():
    assert normalize_tree([lambda: ["div#foo", "bar"]]) == ["div", {"id": "foo"}, "bar"]
    assert normalize_tree([lambda id_, body: ["div#" + id_, body], "foo", "bar"]) == [
        "div",
        {"id": "foo"},
        "bar",
    ]
    assert normalize_tree(["div", lambda: ["div#foo", "bar"]]) == [
        "div",
        {},
        ["div", {"id": "foo"}, "bar"],
    ]
    assert normalize_tree(
        ["div", [lambda id_, body: ["div#" + id_, body], "foo", "bar"], "bar2"]
    ) == ["div", {}, ["div", {"id": "foo"}, "bar"], "bar2"]
    assert normalize_tree(
        ["div", [lambda pair: ["div#" + pair[0], pair[1]], ["foo", "bar"]], "bar2"]
    ) == ["div", {}, ["div", {"id": "foo"}, "bar"], "bar2"]
    assert normalize_tree(["div", "foo", lambda: ["div#foo2", "bar2"], "bar"]) == [
        "div",
        {},
        "foo",
        ["div", {"id": "foo2"}, "bar2"],
        "bar",
    ]


def test_component_returning_none():
    assert normalize_tree([lambda: None]) is None


def test_component_collection_is_a_lazy_iterator():
    result = normalize_tree([lambda items: [["li", i] for i in items], ["a", "b"]])
    assert not isinstance(result, list)
    assert list(result) == [["li", {}, "a"], ["li", {}, "b"]]
    assert list(result) == []


def test_component_collection_is_spliced_into_parent():
    norm = normalize_tree(["ul", [lambda items: [["li", i] for i in items], ["a", "b"]]])
    assert norm == ["ul", {}, ["li", {}, "a"], ["li", {}, "b"]]


def test_generator_children_are_expanded_in_place():
    norm = normalize_tree(["ul", "x", (["li", c] for c in "ab"), "y"])
    assert norm == ["ul", {}, "x", ["li", {}, "a"], ["li", {}, "b"], "y"]


def test_nested_collections_are_flattened():
    pairs = [("a", "foo"), ("b", "bar")]
    norm = normalize_tree(["dl", [[["dt", k], ["dd", v]] for k, v in pairs]])
    assert norm == [
        "dl",
        {},
        ["dt", {}, "a"],
        ["dd", {}, "foo"],
        ["dt", {}, "b"],
        ["dd", {}, "bar"],
    ]


def test_scalars_become_strings():
    assert normalize_tree(None) is None
    assert normalize_tree("text") == "text"
    assert normalize_tree(42) == "42"
    assert normalize_tree(["p", 1.5, 2]) == ["p", {}, "1.5", "2"]
    assert normalize_tree(lambda: 7) == "7"


def test_normalization_is_idempotent():
    canonical = normalize_tree(
        [
            "section#main.wide",
            {"style": {"margin": 0}, "hidden": True},
            ["h1", "Title"],
            [lambda: ["p", "body"]],
            (["i", n] for n in range(2)),
        ]
    )
    assert normalize_tree(canonical) == canonical


@pytest.mark.parametrize(
    "tag", ["div foo", "div##foo", "div#a#b", "", " div", "#id", "div\n", "div#x\n", "div.a\n"]
)
def test_malformed_tags_raise(tag):
    with pytest.raises(InvalidTag) as excinfo:
        normalize_tree([tag, "body"])
    assert excinfo.value.tag == tag


def test_invalid_tag_propagates_from_nested_nodes():
    with pytest.raises(InvalidTag):
        normalize_tree(["div", ["p", [lambda: ["bad tag"]]]])
    with pytest.raises(InvalidTag):
        normalize_tree([["li"], ["bad tag"]])


def test_booleans_in_text_position_use_python_str():
    assert normalize_tree(["p", True, False]) == ["p", {}, "True", "False"]
