"""Unit tests for in-batch duplicate detection."""

from conftest import change, create, delete

from rimeguard.resolution import check_batch_duplicates


class TestCheckBatchDuplicates:
    """Test check_batch_duplicates behavior."""

    def test_first_create_is_not_duplicate(self) -> None:
        """The first occurrence is never a duplicate."""
        items = [create("1", "测试", "test"), create("2", "测试", "test")]
        assert not check_batch_duplicates(items, 0).has_duplicate

    def test_repeated_create_points_at_earlier_item(self) -> None:
        """A repeated Create reports the index of the earlier one."""
        items = [create("1", "测试", "test"), create("2", "测试", "test")]
        assert check_batch_duplicates(items, 1).duplicate_index == 0

    def test_reports_earliest_match(self) -> None:
        """With several earlier matches the earliest wins."""
        items = [
            create("1", "测试", "test"),
            create("2", "其他", "test"),
            create("3", "测试", "test"),
            create("4", "测试", "test"),
        ]
        assert check_batch_duplicates(items, 3).duplicate_index == 0

    def test_same_word_other_code_is_not_duplicate(self) -> None:
        """Both word and code must match."""
        items = [create("1", "测试", "test"), create("2", "测试", "tesi")]
        assert not check_batch_duplicates(items, 1).has_duplicate

    def test_later_items_are_not_considered(self) -> None:
        """Only items before the current one are scanned."""
        items = [create("1", "测试", "test"), create("2", "测试", "test")]
        assert check_batch_duplicates(items, 0).duplicate_index is None

    def test_delete_is_never_duplicate(self) -> None:
        """Non-Create items skip the check."""
        items = [delete("1", "测试", "test"), delete("2", "测试", "test")]
        assert not check_batch_duplicates(items, 1).has_duplicate

    def test_earlier_non_create_does_not_match(self) -> None:
        """An earlier Change with the same word and code is not a duplicate Create."""
        items = [change("1", "旧词", "测试", "test"), create("2", "测试", "test")]
        assert not check_batch_duplicates(items, 1).has_duplicate
