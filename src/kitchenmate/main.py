"""
KitchenMate - CLI Entry Point.

Usage:
    kitchenmate wizard       Run the onboarding wizard in the terminal
    kitchenmate serve        Start the wizard HTTP API
    kitchenmate health       Check configuration
    kitchenmate --help       Show help
"""

import asyncio

import typer
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.prompt import Prompt
from rich.spinner import Spinner
from rich.table import Table

from kitchenmate.wizard.exceptions import WizardError
from kitchenmate.wizard.options import GOAL_OPTIONS, QUICK_ADD_INGREDIENTS, get_wizard_options
from kitchenmate.wizard.results import ResultsStatus
from kitchenmate.wizard.session import SINGLE_CHOICE_FIELDS, WizardSession
from kitchenmate.wizard.steps import WizardStep

app = typer.Typer(
    name="kitchenmate",
    help="KitchenMate - Recipes from what's already in your kitchen.",
    add_completion=False,
)
console = Console()

NAV_HINT = "[dim]b = back, p = profile, q = quit[/dim]"


class _Quit(Exception):
    pass


def _nav(session: WizardSession, choice: str) -> bool:
    """Handle shared navigation keys. Returns True if the input was consumed."""
    choice = choice.strip().lower()
    if choice == "q":
        raise _Quit()
    if choice == "b":
        session.back()
        return True
    if choice == "p":
        session.open_profile()
        return True
    return False


def _advance(session: WizardSession) -> None:
    if session.step == WizardStep.CUISINE:
        with Live(Spinner("dots", text="Cooking up ideas..."), console=console, transient=True):
            asyncio.run(session.advance())
    else:
        asyncio.run(session.advance())


def _pick_index(choice: str, size: int) -> int | None:
    if choice.isdigit() and 1 <= int(choice) <= size:
        return int(choice) - 1
    return None


def _landing(session: WizardSession) -> None:
    console.print(
        Panel.fit(
            "[bold orange1]KitchenMate[/bold orange1]\n"
            "Discover delicious recipes based on the ingredients you already have.\n\n"
            "[dim]Press Enter to get started, or q to quit.[/dim]",
            title="Welcome",
            border_style="orange1",
        )
    )
    if Prompt.ask("", default="", show_default=False).strip().lower() == "q":
        raise _Quit()
    _advance(session)


def _login(session: WizardSession) -> None:
    console.print("\n[bold]Let's get set up![/bold] Tell us a bit about yourself. " + NAV_HINT)
    name = Prompt.ask("Name", default=session.profile.name or None)
    if _nav(session, name or ""):
        return
    age = Prompt.ask("Age", default=session.profile.age or None)
    email = Prompt.ask("Email", default=session.profile.email or "")
    try:
        session.sign_in(name or "", age or "", email or "")
    except WizardError as e:
        console.print(f"[red]{e}[/red]")
        return
    _advance(session)


def _single_choice(session: WizardSession) -> None:
    field_name, labels = SINGLE_CHOICE_FIELDS[session.step]
    options = get_wizard_options()[field_name]
    current = getattr(session.profile, field_name)

    console.print(f"\n[bold]{field_name.replace('_', ' ').title()}[/bold] " + NAV_HINT)
    for i, option in enumerate(options, 1):
        marker = "[green]✓[/green]" if option["label"] == current else " "
        extra = option.get("sub") or option.get("description") or ""
        console.print(f" {marker} {i}. {option['icon']} {option['label']} [dim]{extra}[/dim]")

    choice = Prompt.ask("Pick one")
    if _nav(session, choice):
        return
    index = _pick_index(choice, len(labels))
    if index is None:
        console.print("[red]Pick a number from the list.[/red]")
        return

    if session.answer(labels[index]):
        _advance(session)
    elif Prompt.ask("Show me recipes?", choices=["y", "n"], default="y") == "y":
        _advance(session)


def _ingredients(session: WizardSession) -> None:
    selected = session.profile.ingredients
    console.print("\n[bold]What's in your kitchen?[/bold] " + NAV_HINT)
    console.print(f"Selected: {', '.join(selected) if selected else '[dim]nothing yet[/dim]'}")
    for i, ing in enumerate(QUICK_ADD_INGREDIENTS, 1):
        marker = "[green]✓[/green]" if ing in selected else " "
        console.print(f" {marker} {i}. {ing}")

    choice = Prompt.ask("Number to toggle, text to add, Enter to continue", default="", show_default=False)
    if _nav(session, choice):
        return
    if not choice.strip():
        if session.can_advance:
            _advance(session)
        else:
            console.print("[red]Add at least one ingredient.[/red]")
        return

    index = _pick_index(choice.strip(), len(QUICK_ADD_INGREDIENTS))
    if index is not None:
        session.toggle_ingredient(QUICK_ADD_INGREDIENTS[index])
    else:
        session.add_ingredient(choice)


def _goals(session: WizardSession) -> None:
    console.print("\n[bold]Any health goals?[/bold] " + NAV_HINT)
    for i, goal in enumerate(GOAL_OPTIONS, 1):
        marker = "[green]✓[/green]" if goal in session.profile.goals else " "
        console.print(f" {marker} {i}. {goal}")

    choice = Prompt.ask("Number to toggle, Enter to continue", default="", show_default=False)
    if _nav(session, choice):
        return
    if not choice.strip():
        if session.can_advance:
            _advance(session)
        else:
            console.print("[red]Pick at least one goal.[/red]")
        return

    index = _pick_index(choice.strip(), len(GOAL_OPTIONS))
    if index is not None:
        session.toggle_goal(GOAL_OPTIONS[index])


def _show_recipe(session: WizardSession, index: int) -> None:
    recipe = session.expand_recipe(index)
    ingredients = "\n".join(f"• {i}" for i in recipe.ingredients)
    steps = "\n".join(f"{n}. {s}" for n, s in enumerate(recipe.steps, 1))
    console.print(
        Panel(
            f"[italic]\"{recipe.match_reason}\"[/italic]\n\n"
            f"[bold]Ingredients[/bold]\n{ingredients}\n\n"
            f"[bold]Instructions[/bold]\n{steps}",
            title=f"{recipe.name} · {recipe.cooking_time_minutes} mins",
            border_style="orange1",
        )
    )

    if session.results.is_rated(index):
        console.print("[green]Thanks for your feedback![/green]")
    else:
        stars = Prompt.ask("Tried this? Rate it 1-5 (Enter to skip)", default="", show_default=False)
        if stars.strip():
            comment = Prompt.ask("Any comments? (Optional)", default="", show_default=False)
            try:
                session.rate_recipe(index, int(stars), comment)
                console.print("[green]Thanks for your feedback![/green]")
            except (ValueError, WizardError) as e:
                console.print(f"[red]{e}[/red]")
    session.collapse_recipe()


def _results(session: WizardSession) -> None:
    view = session.results
    if view is None or view.status in (ResultsStatus.ERROR, ResultsStatus.EMPTY):
        console.print(f"\n[bold]Oops![/bold] {view.error if view else ''}")
        choice = Prompt.ask("r = try again, b = back, p = profile, q = quit", choices=["r", "b", "p", "q"], default="r")
        if _nav(session, choice):
            return
        with Live(Spinner("dots", text="Cooking up ideas..."), console=console, transient=True):
            asyncio.run(session.retry())
        return

    table = Table(title="Top Picks for You")
    table.add_column("#", justify="right")
    table.add_column("Recipe", style="bold")
    table.add_column("Time")
    table.add_column("Why it fits", style="dim")
    for i, recipe in enumerate(view.recipes, 1):
        rated = " ✓" if view.is_rated(i - 1) else ""
        table.add_row(str(i), recipe.name + rated, f"{recipe.cooking_time_minutes} mins", recipe.description)
    console.print(table)

    choice = Prompt.ask("Number to view a recipe. " + NAV_HINT)
    if _nav(session, choice):
        return
    index = _pick_index(choice.strip(), len(view.recipes))
    if index is not None:
        _show_recipe(session, index)


def _profile(session: WizardSession) -> None:
    summary = session.profile_summary()
    lines = [
        f"[bold]{summary['name'] or 'Guest'}[/bold]  {summary['email']}",
        f"Age: {summary['age'] or '-'}   Dietary: {summary['dietary'] or '-'}",
        f"Rated dishes: {summary['rated_dishes']}   Favorite cuisine: {summary['favorite_cuisine'] or '-'}",
    ]
    for rating in summary["recent_ratings"]:
        comment = f" - \"{rating['comment']}\"" if rating.get("comment") else ""
        lines.append(f"  ★ {rating['stars']} {rating['dish_name']}{comment}")
    console.print(Panel("\n".join(lines), title="Your Profile", border_style="orange1"))

    choice = Prompt.ask("e = edit, b = back, q = quit", choices=["e", "b", "q"], default="b")
    if choice == "e":
        name = Prompt.ask("Name", default=session.profile.name)
        age = Prompt.ask("Age", default=session.profile.age)
        email = Prompt.ask("Email", default=session.profile.email)
        session.update_details(name, age, email)
        return
    _nav(session, choice)


STEP_HANDLERS = {
    WizardStep.LANDING: _landing,
    WizardStep.LOGIN: _login,
    WizardStep.INGREDIENTS: _ingredients,
    WizardStep.GOALS: _goals,
    WizardStep.RESULTS: _results,
    WizardStep.PROFILE: _profile,
}


@app.command()
def wizard(
    log_prompts: bool = typer.Option(False, "--log-prompts", "-l", help="Log LLM prompts to prompt_logs/"),
) -> None:
    """Run the onboarding wizard and get recipe suggestions."""
    from kitchenmate.config import configure_logging
    from kitchenmate.llm.prompt_logger import enable_prompt_logging, get_session_log_dir

    configure_logging("WARNING")
    if log_prompts:
        enable_prompt_logging(True)
        console.print("[dim]📝 Prompt logging enabled. Check prompt_logs/ after the session.[/dim]")

    session = WizardSession()
    try:
        while True:
            handler = STEP_HANDLERS.get(session.step, _single_choice)
            handler(session)
    except (_Quit, KeyboardInterrupt):
        console.print("\n[dim]Happy cooking! 👋[/dim]")

    if log_prompts:
        log_dir = get_session_log_dir()
        if log_dir:
            console.print(f"[dim]📝 Prompts logged to: {log_dir}[/dim]")


@app.command()
def serve(
    port: int = typer.Option(8000, "--port", "-p", help="Port to run on"),
    reload: bool = typer.Option(False, "--reload", "-r", help="Enable auto-reload for development"),
) -> None:
    """Start the wizard HTTP API."""
    import uvicorn

    console.print("\n[bold green]KitchenMate API[/bold green]")
    console.print(f"Starting server on http://localhost:{port}")
    console.print("[dim]Press Ctrl+C to stop[/dim]\n")

    uvicorn.run(
        "kitchenmate.web.app:app",
        host="0.0.0.0",
        port=port,
        reload=reload,
    )


@app.command()
def health() -> None:
    """Check configuration."""
    from kitchenmate.config import get_settings

    console.print("\n[bold]KitchenMate Health Check[/bold]\n")

    try:
        settings = get_settings()
        console.print("✅ Configuration loaded")
        console.print(f"   Environment: {settings.kitchenmate_env}")
        console.print(f"   Model: {settings.kitchenmate_model}")
        console.print(f"   Log level: {settings.log_level}")

        if settings.openai_api_key.startswith("sk-"):
            console.print("✅ OpenAI API key configured")
        elif settings.has_openai_key:
            console.print("⚠️  OpenAI API key may be invalid")
        else:
            console.print("❌ OPENAI_API_KEY missing - recipe generation will fail")
            raise typer.Exit(1)

        console.print("\n[green]All checks passed![/green]")

    except typer.Exit:
        raise
    except Exception as e:
        console.print(f"\n[red]❌ Configuration error: {e}[/red]")
        console.print("[dim]Make sure you have a .env file with required variables.[/dim]")
        raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show version information."""
    from kitchenmate import __version__

    console.print(f"KitchenMate version {__version__}")


if __name__ == "__main__":
    app()
