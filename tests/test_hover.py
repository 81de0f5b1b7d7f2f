import pytest

from valin.hover import hover_box_height


@pytest.mark.parametrize(
    "lines, height",
    [
        (0, 65),
        (1, 65),
        (2, 100),
        (4, 100),
        (5, 135),
        (6, 135),
        (7, 170),
        (20, 170),
    ],
)
def test_height_by_line_count(lines, height):
    content = "\n".join(f"line {n}" for n in range(lines))
    assert hover_box_height(content) == height


def test_surrounding_whitespace_ignored():
    assert hover_box_height("\n\n  only one  \n\n\n") == hover_box_height("only one")


def test_height_never_shrinks_with_more_lines():
    heights = [hover_box_height("\n".join("x" * n for n in range(1, k + 1))) for k in range(12)]
    assert heights == sorted(heights)