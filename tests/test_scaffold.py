from __future__ import annotations

from pathlib import Path

import pytest

from projectsmith.config import ProjectConfig
from projectsmith.errors import DirectoryConfirmationDeclinedError
from projectsmith.scaffold import ProjectScaffolder, success_message
from projectsmith.template import TemplateRenderer

EXPECTED_FILES = [
    "README.md",
    ".formatter.exs",
    ".gitignore",
    "mix.exs",
    "lib/hello_world.ex",
    "test/test_helper.exs",
    "test/hello_world_test.exs",
]


@pytest.fixture()
def config(resolver) -> ProjectConfig:
    return ProjectConfig.from_path("hello_world", resolver=resolver, host_version="1.15.7")


@pytest.fixture()
def lines() -> list[str]:
    return []


@pytest.fixture()
def scaffolder(lines: list[str]) -> ProjectScaffolder:
    return ProjectScaffolder(TemplateRenderer(), echo=lines.append)


def test_plan_renders_every_file(scaffolder: ProjectScaffolder, config: ProjectConfig):
    files = scaffolder.plan(config)
    assert [rendered.path for rendered in files] == EXPECTED_FILES

    contents = {rendered.path: rendered.content for rendered in files}
    lib = contents["lib/hello_world.ex"]
    assert "defmodule GenDSL.Model.HelloWorld.SampleElement do" in lib
    assert "Documentation for `HelloWorld`." in lib
    assert "use Ecto.Schema" in lib
    assert "field :command, :string, default: \"new\"" in lib
    assert "def changeset(params" in lib
    assert "def to_command(" in lib
    assert "{:ecto, \"~> 3.9\"}" in contents["mix.exs"]
    assert "import_deps: [:ecto]" in contents[".formatter.exs"]
    assert "alias GenDSL.Model.HelloWorld.SampleElement" in contents["test/hello_world_test.exs"]
    assert "defmodule HelloWorld.MixProject do" in contents["mix.exs"]
    assert "app: :hello_world," in contents["mix.exs"]
    assert 'elixir: "~> 1.15",' in contents["mix.exs"]
    assert contents["README.md"].startswith("# HelloWorld\n")
    assert "## Installation" in contents["README.md"]
    assert "hello_world-*.tar" in contents[".gitignore"]
    assert contents["test/test_helper.exs"] == "ExUnit.start()\n"
    assert "<%" not in "".join(contents.values())


def test_plan_is_deterministic(scaffolder: ProjectScaffolder, config: ProjectConfig):
    assert scaffolder.plan(config) == scaffolder.plan(config)


def test_create_writes_expected_structure(
    tmp_path: Path, scaffolder: ProjectScaffolder, config: ProjectConfig, lines: list[str]
):
    project_dir = tmp_path / "hello_world"
    result = scaffolder.create(config, project_dir)

    assert result == project_dir.resolve()
    for relative in EXPECTED_FILES:
        assert (project_dir / relative).is_file(), f"expected {relative} to exist"
    assert lines == [
        "* creating README.md",
        "* creating .formatter.exs",
        "* creating .gitignore",
        "* creating mix.exs",
        "* creating lib",
        "* creating lib/hello_world.ex",
        "* creating test",
        "* creating test/test_helper.exs",
        "* creating test/hello_world_test.exs",
    ]


def test_nested_module_creates_nested_stub(
    tmp_path: Path, scaffolder: ProjectScaffolder, resolver, lines: list[str]
):
    config = ProjectConfig.from_path("x", app="shop", module="Acme.Shop", resolver=resolver, host_version="1.0.0")
    scaffolder.create(config, tmp_path / "shop")
    assert lines[4:] == [
        "* creating lib",
        "* creating lib/acme",
        "* creating lib/acme/shop.ex",
        "* creating test",
        "* creating test/test_helper.exs",
        "* creating test/acme",
        "* creating test/acme/shop_test.exs",
    ]
    stub = (tmp_path / "shop" / "lib" / "acme" / "shop.ex").read_text(encoding="utf-8")
    assert "defmodule GenDSL.Model.Acme.Shop.SampleElement do" in stub
    assert (tmp_path / "shop" / "test" / "acme" / "shop_test.exs").is_file()


def test_dot_reuses_current_directory(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, scaffolder: ProjectScaffolder, resolver
):
    monkeypatch.chdir(tmp_path)
    config = ProjectConfig.from_path(".", app="demo", resolver=resolver, host_version="1.15.0")
    result = scaffolder.create(config, ".")

    assert result == tmp_path.resolve()
    assert not (tmp_path / "demo").exists()
    assert (tmp_path / "lib" / "demo.ex").is_file()
    assert (tmp_path / "test" / "demo_test.exs").is_file()


def test_existing_directory_requires_confirmation(tmp_path: Path, config: ProjectConfig):
    project_dir = tmp_path / "hello_world"
    project_dir.mkdir()
    questions: list[str] = []

    def decline(question: str) -> bool:
        questions.append(question)
        return False

    with pytest.raises(DirectoryConfirmationDeclinedError, match="hello_world"):
        ProjectScaffolder(confirm=decline).create(config, project_dir)

    assert len(questions) == 1
    assert "already exists" in questions[0]
    assert list(project_dir.iterdir()) == []


def test_existing_directory_confirmed(tmp_path: Path, config: ProjectConfig):
    project_dir = tmp_path / "hello_world"
    project_dir.mkdir()
    ProjectScaffolder(confirm=lambda question: True).create(config, project_dir)
    assert (project_dir / "mix.exs").is_file()


def test_identical_files_are_left_alone(tmp_path: Path, config: ProjectConfig, lines: list[str]):
    project_dir = tmp_path / "hello_world"
    ProjectScaffolder().create(config, project_dir)

    ProjectScaffolder(confirm=lambda question: True, echo=lines.append).create(config, project_dir)
    assert lines == []


def test_changed_files_need_overwrite_confirmation(tmp_path: Path, config: ProjectConfig, lines: list[str]):
    project_dir = tmp_path / "hello_world"
    ProjectScaffolder().create(config, project_dir)
    readme = project_dir / "README.md"
    readme.write_text("custom", encoding="utf-8")

    answers = iter([True, False])
    ProjectScaffolder(confirm=lambda question: next(answers), echo=lines.append).create(config, project_dir)
    assert readme.read_text(encoding="utf-8") == "custom"
    assert lines == ["* skipping README.md"]

    ProjectScaffolder(confirm=lambda question: True, echo=lines.append).create(config, project_dir)
    assert readme.read_text(encoding="utf-8").startswith("# HelloWorld")


def test_success_message():
    assert "cd hello_world\n    mix test" in success_message("hello_world")
    assert "cd " not in success_message(".")
    assert "    mix test" in success_message(".")
