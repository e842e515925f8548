"""Property-based tests for remote URL normalization."""

from hypothesis import given, settings, strategies as st

from podrepo.repository import is_protected_remote, normalize_remote_url

_SEGMENT_ALPHABET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789-_"

segment = st.text(alphabet=_SEGMENT_ALPHABET, min_size=1, max_size=20)

https_url = st.builds(
    lambda host, owner, repo: f"https://{host}.com/{owner}/{repo}",
    segment,
    segment,
    segment,
)
ssh_url = st.builds(
    lambda host, owner, repo: f"git@{host}.com:{owner}/{repo}",
    segment,
    segment,
    segment,
)
base_url = st.one_of(https_url, ssh_url)

suffix = st.sampled_from(["", ".git", "/", ".git/", " ", "\n", ".git\n"])


class TestNormalizeProperties:
    @settings(max_examples=100)
    @given(url=base_url, tail=suffix)
    def test_decorations_are_removed(self, url: str, tail: str) -> None:
        assert normalize_remote_url(url + tail) == url

    @settings(max_examples=100)
    @given(url=base_url, tail=suffix)
    def test_idempotent(self, url: str, tail: str) -> None:
        once = normalize_remote_url(url + tail)
        assert normalize_remote_url(once) == once


class TestProtectedProperties:
    @settings(max_examples=50)
    @given(
        protected=st.lists(base_url, min_size=1, max_size=3),
        others=st.lists(base_url, max_size=3),
        index=st.integers(min_value=0),
        tail=suffix,
    )
    def test_any_decorated_protected_url_is_detected(
        self, protected: list[str], others: list[str], index: int, tail: str
    ) -> None:
        chosen = protected[index % len(protected)] + tail
        assert is_protected_remote([*others, chosen], protected) is True

    @settings(max_examples=50)
    @given(remotes=st.lists(https_url, max_size=5), protected=st.lists(ssh_url))
    def test_disjoint_urls_are_not_protected(
        self, remotes: list[str], protected: list[str]
    ) -> None:
        assert is_protected_remote(remotes, protected) is False
