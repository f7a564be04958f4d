"""
Typer CLI for quizgrade.

Commands:
    quizgrade db init                       - Create database tables
    quizgrade quiz create quiz.json         - Author a quiz from a JSON file
    quizgrade quiz list                     - List quizzes (no answer keys)
    quizgrade quiz show <quiz-id>           - Show a quiz with its questions
    quizgrade quiz submit <quiz-id> a.json  - Grade a submission
    quizgrade serve                         - Run the HTTP API

Usage:
    quizgrade --help
    quizgrade quiz create examples/js_basics.json
    quizgrade quiz submit 9f1c... answers.json
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import typer
from loguru import logger
from rich import print as rprint
from rich.console import Console
from rich.table import Table

from config import get_settings
from quizgrade.log import configure_logging

app = typer.Typer(
    help="quizgrade CLI: author quizzes and grade submissions",
    no_args_is_help=True,
)

console = Console()


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Quiz authoring and automatic scoring."""
    configure_logging("DEBUG" if verbose else get_settings().log_level)


def _read_json(path: Path) -> Any:
    """Load a JSON file, exiting with a readable message on failure."""
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        rprint(f"[red]File not found:[/red] {path}")
        raise typer.Exit(code=1)
    except json.JSONDecodeError as e:
        rprint(f"[red]Invalid JSON in {path}:[/red] {e}")
        raise typer.Exit(code=1)


# ========================================
# DB COMMANDS
# ========================================

db_app = typer.Typer(help="Database operations")
app.add_typer(db_app, name="db")


@db_app.command("init")
def db_init() -> None:
    """Create the quiz tables if they do not exist."""
    from quizgrade.db.database import init_db

    init_db()
    rprint("[green]Database initialized[/green]")


# ========================================
# QUIZ COMMANDS
# ========================================

quiz_app = typer.Typer(help="Author, inspect and grade quizzes")
app.add_typer(quiz_app, name="quiz")


@quiz_app.command("create")
def quiz_create(
    path: Path = typer.Argument(..., help="JSON file with title, description and questions"),
) -> None:
    """
    Create a quiz from an authoring JSON file.

    Examples:
        quizgrade quiz create js_basics.json
    """
    from quizgrade.db.database import init_db, session_scope
    from quizgrade.db.repository import QuizRepository
    from quizgrade.quiz import QuizValidationError, build_quiz

    payload = _read_json(path)
    try:
        quiz = build_quiz(payload)
    except QuizValidationError as e:
        rprint(f"[red]Invalid quiz:[/red] {e}")
        raise typer.Exit(code=1)

    init_db()
    with session_scope() as session:
        QuizRepository(session).create(quiz)

    rprint(f"\n[bold green]Created quiz[/bold green] {quiz.title}")
    rprint(f"  ID: [cyan]{quiz.id}[/cyan]")
    rprint(f"  Questions: {len(quiz.questions)}  Max score: {quiz.max_score}\n")

    table = Table(title="Question IDs", show_header=True)
    table.add_column("#", justify="right", style="dim")
    table.add_column("ID", style="cyan")
    table.add_column("Type")
    table.add_column("Question")
    for position, question in enumerate(quiz.questions, start=1):
        table.add_row(str(position), question.id, question.question_type.value, question.text)
    console.print(table)


@quiz_app.command("list")
def quiz_list() -> None:
    """List quizzes, newest first."""
    from quizgrade.db.database import init_db, session_scope
    from quizgrade.db.repository import QuizRepository

    init_db()
    with session_scope() as session:
        summaries = QuizRepository(session).list_summaries()

    if not summaries:
        rprint("[dim]No quizzes yet[/dim]")
        return

    table = Table(title="Quizzes", show_header=True)
    table.add_column("ID", style="cyan")
    table.add_column("Title", style="bold")
    table.add_column("Description")
    table.add_column("Created", style="dim")
    for summary in summaries:
        table.add_row(
            summary.id,
            summary.title,
            summary.description or "-",
            summary.created_at.strftime("%Y-%m-%d %H:%M"),
        )
    console.print(table)


@quiz_app.command("show")
def quiz_show(
    quiz_id: str = typer.Argument(..., help="Quiz ID"),
    answers: bool = typer.Option(True, "--answers/--no-answers", help="Show answer keys"),
) -> None:
    """Show a quiz and its questions."""
    from quizgrade.db.database import init_db, session_scope
    from quizgrade.db.repository import QuizRepository
    from quizgrade.quiz import QuizNotFoundError

    init_db()
    try:
        with session_scope() as session:
            quiz = QuizRepository(session).get(quiz_id)
    except QuizNotFoundError:
        rprint(f"[red]Quiz not found:[/red] {quiz_id}")
        raise typer.Exit(code=1)

    rprint(f"\n[bold cyan]{quiz.title}[/bold cyan]")
    if quiz.description:
        rprint(f"  {quiz.description}")
    rprint("")

    table = Table(show_header=True)
    table.add_column("#", justify="right", style="dim")
    table.add_column("ID", style="cyan")
    table.add_column("Type")
    table.add_column("Question")
    table.add_column("Marks", justify="right")
    if answers:
        table.add_column("Answer key", style="green")

    for position, question in enumerate(quiz.questions, start=1):
        row = [str(position), question.id, question.question_type.value, question.text, str(question.marks)]
        if answers:
            row.append(_answer_key(question))
        table.add_row(*row)
    console.print(table)


def _answer_key(question) -> str:
    """Answer key column text; the correct mcq option is starred."""
    data = question.to_dict()
    if "options" in data:
        return "\n".join(
            f"{'*' if i == data['correctOptionIndex'] else ' '} {i}. {opt}"
            for i, opt in enumerate(data["options"])
        )
    if "correctBoolean" in data:
        return "True" if data["correctBoolean"] else "False"
    return data.get("correctTextAnswer") or "[dim](none)[/dim]"


@quiz_app.command("submit")
def quiz_submit(
    quiz_id: str = typer.Argument(..., help="Quiz ID"),
    path: Path = typer.Argument(..., help='JSON file: {"answers": [...]} or a bare list'),
    as_json: bool = typer.Option(False, "--json", help="Print the raw score report"),
) -> None:
    """
    Grade a submission against a stored quiz.

    Examples:
        quizgrade quiz submit 9f1c... answers.json
        quizgrade quiz submit 9f1c... answers.json --json
    """
    from quizgrade.db.database import init_db, session_scope
    from quizgrade.db.repository import QuizRepository
    from quizgrade.quiz import QuizNotFoundError, QuizValidationError, parse_answers, score_quiz

    payload = _read_json(path)
    if isinstance(payload, list):
        payload = {"answers": payload}

    try:
        submitted = parse_answers(payload)
    except QuizValidationError as e:
        rprint(f"[red]Invalid answers:[/red] {e}")
        raise typer.Exit(code=1)

    init_db()
    try:
        with session_scope() as session:
            quiz = QuizRepository(session).get(quiz_id)
    except QuizNotFoundError:
        rprint(f"[red]Quiz not found:[/red] {quiz_id}")
        raise typer.Exit(code=1)

    report = score_quiz(quiz, submitted, min_ratio=get_settings().text_match_min_ratio)
    logger.debug(f"Graded submission for {quiz_id}: {report.score}/{report.max_score}")

    if as_json:
        typer.echo(json.dumps(report.to_dict(), indent=2))
        return

    table = Table(title=f"Results: {report.title}", show_header=True)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Question")
    table.add_column("Type")
    table.add_column("Marks", justify="right")
    table.add_column("Result", justify="center")
    for position, detail in enumerate(report.details, start=1):
        table.add_row(
            str(position),
            detail.question_text,
            detail.question_type.value,
            str(detail.marks),
            "[green]correct[/green]" if detail.is_correct else "[red]incorrect[/red]",
        )
    console.print(table)

    rprint(
        f"\n[bold]Score:[/bold] {report.score}/{report.max_score} "
        f"({report.percentage:.0f}%)  "
        f"[bold]Correct:[/bold] {report.correct_count}/{report.total_questions}\n"
    )


# ========================================
# SERVER
# ========================================


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind host (default from settings)"),
    port: Optional[int] = typer.Option(None, "--port", help="Bind port (default from settings)"),
    reload: bool = typer.Option(False, "--reload", help="Auto-reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "quizgrade.api.main:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


def run() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    run()
