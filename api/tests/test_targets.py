"""Tests for target parsing."""

import pytest

from glassheart import targets
from glassheart.targets import GalleryTarget, InvalidTarget, MemberTarget, PostTarget


class TestFromType:
    def test_member_and_post_ids_are_parsed(self):
        assert targets.from_type("member", "3") == MemberTarget(3)
        assert targets.from_type("post", 7) == PostTarget(7)

    def test_gallery_keeps_group_name(self):
        assert targets.from_type("gallery", "ai") == GalleryTarget("ai")

    def test_keys_are_strings(self):
        assert MemberTarget(3).key == "3"
        assert GalleryTarget("anime").key == "anime"

    @pytest.mark.parametrize("target_type,target_id", [
        ("team", 1),
        ("member", "abc"),
        ("member", "\u00b2"),
        ("post", "1\u00b2"),
        ("post", True),
        ("post", None),
        ("gallery", ""),
    ])
    def test_invalid_pairs(self, target_type, target_id):
        with pytest.raises(InvalidTarget):
            targets.from_type(target_type, target_id)


class TestCommentFields:
    def test_exactly_one_field(self):
        assert targets.from_comment_fields(post_id=7) == PostTarget(7)
        assert targets.from_comment_fields(member_id=2) == MemberTarget(2)
        assert targets.from_comment_fields(gallery_group="ai") == GalleryTarget("ai")

    def test_empty_values_count_as_unset(self):
        assert targets.from_comment_fields(post_id=0, member_id=4, gallery_group="") == MemberTarget(4)

    def test_none_set(self):
        with pytest.raises(InvalidTarget):
            targets.from_comment_fields()

    def test_two_set(self):
        with pytest.raises(InvalidTarget):
            targets.from_comment_fields(post_id=1, gallery_group="ai")

    def test_comment_fields_fill_one_column(self):
        assert targets.comment_fields(PostTarget(7)) == {
            "post_id": 7,
            "member_id": None,
            "gallery_group": None,
        }
        assert targets.comment_fields(GalleryTarget("ai")) == {
            "post_id": None,
            "member_id": None,
            "gallery_group": "ai",
        }
