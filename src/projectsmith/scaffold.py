"""Project scaffolding helpers."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from .config import ProjectConfig
from .errors import DirectoryConfirmationDeclinedError
from .schema import RenderedFile
from .skeleton import skeleton_files
from .template import TemplateRenderer

__all__ = ["ProjectScaffolder", "success_message"]


LOGGER = logging.getLogger(__name__)

Confirm = Callable[[str], bool]
Echo = Callable[[str], None]


def _decline(message: str) -> bool:
    return False


def success_message(path: str | Path) -> str:
    """Return the instructions printed once a project has been generated."""

    cd_line = "" if str(path) == "." else f"cd {path}\n    "
    return (
        "\n"
        "Your Mix project was created successfully.\n"
        'You can use "mix" to compile it, test it, and more:\n'
        "\n"
        f"    {cd_line}mix test\n"
        "\n"
        'Run "mix help" for more commands.'
    )


class ProjectScaffolder:
    """Render the project skeleton and write it below a target directory.

    ``confirm`` receives a yes/no question and returns the answer; it is asked
    before reusing an existing directory and before overwriting a file whose
    content differs. Without it every such question is answered with no.
    ``echo`` receives one status line per created or skipped path.
    """

    def __init__(
        self,
        renderer: TemplateRenderer | None = None,
        *,
        confirm: Confirm | None = None,
        echo: Echo | None = None,
    ) -> None:
        self.renderer = renderer or TemplateRenderer()
        self.confirm = confirm or _decline
        self.echo = echo or (lambda line: None)

    def plan(self, config: ProjectConfig) -> list[RenderedFile]:
        """Render every skeleton file for ``config`` without touching the disk."""

        context = config.context()
        return [
            RenderedFile(path=relative_path, content=self.renderer.render(name, context))
            for relative_path, name in skeleton_files(config.mod_filename)
        ]

    def create(self, config: ProjectConfig, target_dir: str | Path) -> Path:
        """Create the project described by ``config`` inside ``target_dir``.

        ``"."`` reuses the current directory without asking. Any other
        existing directory is only reused after confirmation, otherwise
        :class:`DirectoryConfirmationDeclinedError` is raised before anything
        is written.
        """

        files = self.plan(config)

        if str(target_dir) == ".":
            target_path = Path.cwd()
        else:
            target_path = Path(target_dir).expanduser()
            self._check_directory(target_dir, target_path)
            target_path.mkdir(parents=True, exist_ok=True)

        for rendered in files:
            destination = target_path / rendered.path
            self._create_directories(target_path, destination.parent)
            self._write(target_path, destination, rendered.content)

        return target_path.resolve()

    def _check_directory(self, target_dir: str | Path, target_path: Path) -> None:
        if not target_path.is_dir():
            return
        question = f'The directory "{target_dir}" already exists. Are you sure you want to continue?'
        if not self.confirm(question):
            raise DirectoryConfirmationDeclinedError(
                f'The directory "{target_dir}" already exists, please select another directory for installation'
            )

    def _create_directories(self, root: Path, directory: Path) -> None:
        missing: list[Path] = []
        while directory != root and not directory.is_dir():
            missing.append(directory)
            directory = directory.parent
        for path in reversed(missing):
            self.echo(f"* creating {path.relative_to(root).as_posix()}")
            path.mkdir(exist_ok=True)

    def _write(self, root: Path, destination: Path, content: str) -> None:
        relative = destination.relative_to(root).as_posix()
        if destination.exists():
            if destination.read_text(encoding="utf-8") == content:
                LOGGER.debug("%s is up to date", relative)
                return
            if not self.confirm(f"{relative} already exists, overwrite?"):
                self.echo(f"* skipping {relative}")
                return
        self.echo(f"* creating {relative}")
        LOGGER.debug("writing %d characters to %s", len(content), destination)
        destination.write_text(content, encoding="utf-8")
