import pytest

from related_features.urls import normalize_image_url, normalize_image_urls


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("http://x/y.jpg", "https://x/y.jpg"),
        ("https://x/y.jpg", "https://x/y.jpg"),
        ("HTTP://x/y.jpg", "https://x/y.jpg"),
        (
            "http://commons.wikimedia.org/wiki/Special:FilePath/Brooklyn%20Bridge.jpg",
            "https://commons.wikimedia.org/wiki/Special:FilePath/Brooklyn%20Bridge.jpg",
        ),
        ("ftp://files.example.com/y.jpg", "ftp://files.example.com/y.jpg"),
        (
            "http://commons.wikimedia.org/wiki/Special:FilePath/Br%C3%BCcke%20%28NYC%29%27s%2Cx.jpg",
            "https://commons.wikimedia.org/wiki/Special:FilePath/Br%C3%BCcke%20%28NYC%29%27s%2Cx.jpg",
        ),
    ],
)
def test_normalize_image_url(raw: str, expected: str) -> None:
    assert normalize_image_url(raw) == expected


@pytest.mark.parametrize("raw", ["not a url", "", "   ", "/relative/y.jpg", None, 42])
def test_normalize_image_url_drops_unusable_values(raw) -> None:
    assert normalize_image_url(raw) is None


def test_normalize_image_urls_skips_bad_items_only() -> None:
    values = [
        "http://commons.org/img1.jpg",
        "not a url",
        "https://commons.org/img2.jpg",
    ]

    assert normalize_image_urls(values) == [
        "https://commons.org/img1.jpg",
        "https://commons.org/img2.jpg",
    ]


def test_normalize_image_urls_empty() -> None:
    assert normalize_image_urls([]) == []
