"""Publication request model."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class PublishRequest:
    """Everything a publication run needs from the caller.

    Built once by the CLI; components read it and never consult the
    environment themselves.

    Attributes:
        repo: Name or URL of the target spec repo.
        podspec: Podspec to publish, or None for every podspec in the
            working directory.
        allow_warnings: Accept specs that only have lint warnings.
        use_libraries: Lint with static libraries instead of frameworks.
        source_urls: Spec repos dependencies are resolved against; empty
            means every configured source.
        local_only: Commit without pushing to the remote.
        private: Ignore lint results that only apply to public repos.
        commit_message: Explicit commit message. None when not given; an
            empty string asks for one in the editor.
        use_json: Write the spec as pretty-printed JSON.
        editor: Editor command used to prompt for a commit message.
    """

    repo: str
    podspec: Path | None = None
    allow_warnings: bool = False
    use_libraries: bool = False
    source_urls: tuple[str, ...] = ()
    local_only: bool = False
    private: bool = True
    commit_message: str | None = None
    use_json: bool = False
    editor: str | None = None

    @property
    def use_frameworks(self) -> bool:
        return not self.use_libraries

    @property
    def wants_editor(self) -> bool:
        """True when the commit message should come from the editor."""
        return self.commit_message == "" and bool(self.editor)
