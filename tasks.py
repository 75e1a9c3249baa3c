from pathlib import Path

from invoke import task
from invoke.context import Context

project_root = Path(__file__).parent.absolute()
api_root = project_root / Path("api")


@task
def init_poetry_env(ctx: Context) -> None:
    """Initialize the docstore local poetry environment"""
    with ctx.cd(project_root):
        print("Initialize docstore local poetry environment")
        ctx.run("poetry install --extras test")


@task(help={"init": "initialize poetry environment before running server"})
def run_api_server_with_poetry(ctx: Context, init: bool = False) -> None:
    """Run the docstore REST API server with poetry"""
    with ctx.cd(project_root):
        if init:
            init_poetry_env(ctx)
        print("Starting docstore API server")
        ctx.run("poetry run python -m docstore.app")


@task(help={"emulator_host": "host:port of a running Firestore emulator"})
def run_api_server_with_emulator(ctx: Context, emulator_host: str = "localhost:8686") -> None:
    """Run the docstore REST API server against a local Firestore emulator"""
    with ctx.cd(project_root):
        print(f"Starting docstore API server against emulator {emulator_host}")
        ctx.run(
            "poetry run python -m docstore.app",
            env={"FIRESTORE_EMULATOR_HOST": emulator_host, "FIRESTORE_PROJECT_ID": "demo-docstore"},
        )


@task
def test(ctx: Context) -> None:
    """Run docstore tests"""
    with ctx.cd(project_root):
        print("Run docstore tests")
        ctx.run("poetry run pytest tests || poetry run pytest --last-failed tests")
