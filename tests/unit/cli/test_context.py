from podrepo.cli._commands._context import CLIContext
from podrepo.config import Config


class TestCLIContext:
    def test_get_current_without_context_returns_defaults(self) -> None:
        ctx = CLIContext.get_current()
        assert ctx.verbose is False
        assert ctx.logger is None
        assert ctx.config.sources.repos_dir == "~/.cocoapods/repos"

    def test_set_current_and_reset(self) -> None:
        ctx = CLIContext(config=Config.from_dict({}), verbose=True)

        CLIContext.set_current(ctx)
        assert CLIContext.get_current() is ctx

        CLIContext.reset()
        assert CLIContext.get_current() is not ctx
