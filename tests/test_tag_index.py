import pytest

from wirebox.shared.errors import InvalidArgumentError
from wirebox.shared.tags.tag_index import TagIndex


class TestTagIndex:

    def test_find_by_tag(self):
        index = TagIndex()
        index.add("foo", ["tagged", "tag_a"])
        index.add("bar", ["tagged", "tag_b"])
        assert index.find_by_tag("tagged") == ["foo", "bar"]
        assert index.find_by_tag("tag_a") == ["foo"]
        assert index.find_by_tag("tag_b") == ["bar"]

    def test_unknown_tag_is_empty(self):
        assert TagIndex().find_by_tag("nope") == []

    def test_duplicate_tags_list_name_once(self):
        index = TagIndex()
        index.add("foo", ["x", "x"])
        assert index.tags_for("foo") == ["x", "x"]
        assert index.find_by_tag("x") == ["foo"]

    def test_add_replaces_previous_tags(self):
        index = TagIndex()
        index.add("foo", ["old"])
        index.add("foo", ["new"])
        assert index.find_by_tag("old") == []
        assert "old" not in index.all_tags()
        assert index.find_by_tag("new") == ["foo"]

    def test_remove_prunes_empty_tags(self):
        index = TagIndex()
        index.add("foo", ["shared", "only_foo"])
        index.add("bar", ["shared"])
        index.remove("foo")
        assert index.find_by_tag("shared") == ["bar"]
        assert index.find_by_tag("only_foo") == []
        assert index.all_tags() == ["shared"]
        assert "foo" not in index
        index.remove("bar")
        assert index.all_tags() == []

    def test_remove_unknown_name_is_noop(self):
        index = TagIndex()
        index.add("foo", ["x"])
        index.remove("bar")
        assert index.find_by_tag("x") == ["foo"]

    def test_empty_tag_list(self):
        index = TagIndex()
        index.add("foo", [])
        assert "foo" in index
        assert index.tags_for("foo") == []

    @pytest.mark.parametrize("tags", ["tag", 1, {}, None, False, object()])
    def test_tags_must_be_a_list(self, tags):
        with pytest.raises(InvalidArgumentError) as exc:
            TagIndex().add("foo", tags)
        assert exc.value.code == "tags-not-array"

    def test_each_tag_must_be_a_string(self):
        index = TagIndex()
        with pytest.raises(InvalidArgumentError) as exc:
            index.add("foo", ["string", 1])
        assert exc.value.code == "tag-not-string"
        assert "index 1" in str(exc.value)
        assert "foo" not in index

    def test_name_must_be_a_string(self):
        with pytest.raises(InvalidArgumentError):
            TagIndex().add(1, ["x"])

    def test_tags_for_returns_a_copy(self):
        index = TagIndex()
        index.add("foo", ["x"])
        index.tags_for("foo").append("y")
        index.find_by_tag("x").append("bar")
        assert index.tags_for("foo") == ["x"]
        assert index.find_by_tag("x") == ["foo"]

    def test_readd_keeps_position_in_kept_tags(self):
        index = TagIndex()
        index.add("a", ["x", "y"])
        index.add("b", ["x", "y"])
        index.add("a", ["x", "z"])
        assert index.find_by_tag("x") == ["a", "b"]
        assert index.find_by_tag("y") == ["b"]
        assert index.find_by_tag("z") == ["a"]
        assert index.tags_for("a") == ["x", "z"]

    def test_readd_with_no_tags_prunes_emptied_groups(self):
        index = TagIndex()
        index.add("a", ["solo"])
        index.add("a", [])
        assert index.all_tags() == []
        assert "a" in index
