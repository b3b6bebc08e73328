# tests/domain/test_url_path.py
from domain.url_path import clean_path, escape_path, join_path, normalize_escaped_path, root_path


class TestCleanPath:
    def test_empty_becomes_dot(self):
        assert clean_path("") == "."

    def test_root_stays_root(self):
        assert clean_path("/") == "/"

    def test_collapses_duplicate_slashes(self):
        assert clean_path("/a//b///c") == "/a/b/c"

    def test_drops_dot_and_trailing_slash(self):
        assert clean_path("/a/./b/") == "/a/b"

    def test_resolves_dot_dot(self):
        assert clean_path("/a/b/../c") == "/a/c"

    def test_never_climbs_above_root(self):
        assert clean_path("/..") == "/"
        assert clean_path("/a/b/../../..") == "/"
        assert clean_path("/../a") == "/a"

    def test_relative_path_keeps_leading_dot_dot(self):
        assert clean_path("../a") == "../a"
        assert clean_path("a/../..") == ".."

    def test_relative_path_collapsing_to_nothing(self):
        assert clean_path("a/..") == "."


class TestJoinPath:
    def test_appends_segment(self):
        assert join_path("/some/path", "new") == "/some/path/new"

    def test_dot_dot_moves_up(self):
        assert join_path("/some/path", "..") == "/some"

    def test_empty_and_dot_segments_are_no_ops(self):
        assert join_path("/some/path", "") == "/some/path"
        assert join_path("/some/path", ".") == "/some/path"

    def test_all_empty_gives_empty(self):
        assert join_path("", "") == ""

    def test_empty_prefix_keeps_path(self):
        assert join_path("", "/some/path") == "/some/path"

    def test_prefix_with_rooted_path(self):
        assert join_path("/prefix", "/some/path") == "/prefix/some/path"

    def test_empty_middle_element_is_ignored(self):
        assert join_path("a", "", "b") == "a/b"

    def test_rooted_join_never_escapes(self):
        assert join_path("/", "..") == "/"
        assert join_path("/some", "../../../x") == "/x"


class TestRootPath:
    def test_relative_path_is_rooted(self):
        assert root_path("a/b") == "/a/b"

    def test_empty_is_root(self):
        assert root_path("") == "/"

    def test_dot_dot_cannot_escape(self):
        assert root_path("../../etc") == "/etc"


class TestEscaping:
    def test_escape_path_encodes_percent_and_space(self):
        assert escape_path("a b/100%") == "a%20b/100%25"

    def test_escape_path_keeps_dot_segments(self):
        assert escape_path("..") == ".."

    def test_normalize_keeps_existing_escapes(self):
        assert normalize_escaped_path("/a%2Fb%FF") == "/a%2Fb%FF"

    def test_normalize_escapes_raw_characters(self):
        assert normalize_escaped_path("/a b/é") == "/a%20b/%C3%A9"
