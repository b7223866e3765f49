"""Template bodies and file layout of a generated project.

Templates are plain strings rendered by :mod:`projectsmith.template` with the
context keys ``app``, ``mod`` and ``version``.
"""

from __future__ import annotations

from types import MappingProxyType

__all__ = ["TEMPLATES", "skeleton_files"]


README_TEMPLATE = """# <%= mod %>

**TODO: Add description**
<%= if app do %>
## Installation

If [available in Hex](https://hex.pm/docs/publish), the package can be installed
by adding `<%= app %>` to your list of dependencies in `mix.exs`:

```elixir
def deps do
  [
    {:<%= app %>, "~> 0.1.0"}
  ]
end
```

Documentation can be generated with [ExDoc](https://github.com/elixir-lang/ex_doc)
and published on [HexDocs](https://hexdocs.pm). Once published, the docs can
be found at <https://hexdocs.pm/<%= app %>>.
<% end %>
"""

FORMATTER_TEMPLATE = """# Used by "mix format"
[
  import_deps: [:ecto],
  inputs: ["{mix,.formatter}.exs", "{config,lib,test}/**/*.{ex,exs}"]
]
"""

GITIGNORE_TEMPLATE = """# The directory Mix will write compiled artifacts to.
/_build/

# If you run "mix test --cover", coverage assets end up here.
/cover/

# The directory Mix downloads your dependencies sources to.
/deps/

# Where third-party dependencies like ExDoc output generated docs.
/doc/

# Ignore .fetch files in case you like to edit your project deps locally.
/.fetch

# If the VM crashes, it generates a dump, let's ignore it too.
erl_crash.dump

# Also ignore archive artifacts (built via "mix archive.build").
*.ez
<%= if app do %>
# Ignore package tarball (built via "mix hex.build").
<%= app %>-*.tar
<% end %>
# Temporary files, for example, from tests.
/tmp/
"""

MANIFEST_TEMPLATE = """defmodule <%= mod %>.MixProject do
  use Mix.Project

  def project do
    [
      app: :<%= app %>,
      version: "0.1.0",
      elixir: "~> <%= version %>",
      start_permanent: Mix.env() == :prod,
      deps: deps()
    ]
  end

  # Run "mix help compile.app" to learn about applications.
  def application do
    [
      extra_applications: [:logger]
    ]
  end

  # Run "mix help deps" to learn about dependencies.
  defp deps do
    [
      # {:dep_from_hexpm, "~> 0.3.0"},
      # {:dep_from_git, git: "https://github.com/elixir-lang/my_dep.git", tag: "0.1.0"}
      {:ecto, "~> 3.9"}
    ]
  end
end
"""

# A GenDSL plugin starter: an Ecto schema describing one DSL element.
LIB_TEMPLATE = r'''defmodule GenDSL.Model.<%= mod %>.SampleElement do
  @moduledoc """
  Documentation for `<%= mod %>`.

  A sample GenDSL element, backed by an Ecto schema.
  """

  use Ecto.Schema
  import Ecto.Changeset

  embedded_schema do
    field :name, :string
    field :command, :string, default: "new"
  end

  @required_fields ~w(name)a
  @optional_fields ~w(command)a

  @doc """
  Casts and validates `params` into a sample element changeset.
  """
  def changeset(params \\ %{}) do
    %__MODULE__{}
    |> cast(params, @required_fields ++ @optional_fields)
    |> validate_required(@required_fields)
  end

  @doc """
  Renders the element as a command line.

  For example `%{command: "new", name: "demo"}` renders as `"new demo"`.
  """
  def to_command(%__MODULE__{command: command, name: name}) do
    "#{command} #{name}"
  end
end
'''

TEST_TEMPLATE = """defmodule GenDSL.Model.<%= mod %>.SampleElementTest do
  use ExUnit.Case
  alias GenDSL.Model.<%= mod %>.SampleElement

  test "changeset requires a name" do
    refute SampleElement.changeset(%{}).valid?
  end

  test "to_command joins the command and the name" do
    changeset = SampleElement.changeset(%{name: "demo"})
    assert changeset.valid?
    assert changeset |> Ecto.Changeset.apply_changes() |> SampleElement.to_command() == "new demo"
  end
end
"""

TEST_HELPER_TEMPLATE = """ExUnit.start()
"""

TEMPLATES = MappingProxyType(
    {
        "readme": README_TEMPLATE,
        "formatter": FORMATTER_TEMPLATE,
        "gitignore": GITIGNORE_TEMPLATE,
        "manifest": MANIFEST_TEMPLATE,
        "lib": LIB_TEMPLATE,
        "test": TEST_TEMPLATE,
        "test_helper": TEST_HELPER_TEMPLATE,
    }
)


def skeleton_files(mod_filename: str) -> tuple[tuple[str, str], ...]:
    """Return ``(relative path, template name)`` pairs in write order."""

    return (
        ("README.md", "readme"),
        (".formatter.exs", "formatter"),
        (".gitignore", "gitignore"),
        ("mix.exs", "manifest"),
        (f"lib/{mod_filename}.ex", "lib"),
        ("test/test_helper.exs", "test_helper"),
        (f"test/{mod_filename}_test.exs", "test"),
    )
