"""Main invoke tasks file. Use `inv --list` to see available tasks."""

from invoke import Collection, Context, task


@task(name="lint")
def lint(ctx: Context) -> None:
    """Run linting and format checks (no fixes) - for CI."""
    ctx.run("ruff check src tests")
    ctx.run("ruff format --check src tests")


@task(name="format")
def format_code(ctx: Context) -> None:
    """Format code using ruff - for local dev."""
    ctx.run("ruff check src tests --fix")
    ctx.run("ruff format src tests")


@task(
    name="test",
    help={"docker": "Also run tests that need a local container engine"},
)
def run_tests(ctx: Context, docker: bool = False) -> None:
    """Run tests."""
    docker_flag = " --run-docker" if docker else ""
    ctx.run(f"pytest{docker_flag}", pty=True)


@task(help={"verbose": "Log engine commands"})
def up(ctx: Context, verbose: bool = False) -> None:
    """Start a fresh OPC PLC simulator container (reaps stale ones first)."""
    verbose_flag = " --verbose" if verbose else ""
    ctx.run(f"python -m opcplc_harness{verbose_flag} up")


@task(help={"continue_on_error": "Keep going past individual stop/remove failures"})
def down(ctx: Context, continue_on_error: bool = False) -> None:
    """Stop and remove recent OPC PLC simulator containers."""
    flag = " --continue-on-error" if continue_on_error else ""
    ctx.run(f"python -m opcplc_harness reap{flag}")


# Create plc namespace
plc_ns = Collection("plc")
plc_ns.add_task(up)
plc_ns.add_task(down)

ns = Collection()
ns.add_task(lint)
ns.add_task(format_code)
ns.add_task(run_tests)
ns.add_collection(plc_ns)
