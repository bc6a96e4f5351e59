# Rev 0.2.0
# diyprojects – menu loop (Rev 0.2.0)
"""
Interactive session loop.

The only session state is the currently selected project. Every menu handler
is a function (state, console, service) -> new state; nothing is stored on a
shared object.
"""
from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Callable, Dict, List, Optional, Tuple

from ..models.entities import Project
from ..models.errors import InputError
from ..services.project_service import ProjectService
from ..utils.logging_setup import get_logger
from .console import Console

NO_SELECTION_GUIDANCE = (
    "\nYou currently have no project selected. Press 4 at the main menu to select a project."
)

_log = get_logger("session")


@dataclass(frozen=True)
class SessionState:
    selected: Optional[Project] = None
    done: bool = False


Handler = Callable[[SessionState, Console, ProjectService], SessionState]


# ---------- helpers ----------

def _print_projects(console: Console, service: ProjectService) -> None:
    projects = service.fetch_all_projects()
    console.out("\nProjects:")
    for p in projects:
        console.out(f"   {p.project_id}: {p.project_name}")


def _keep(new, old):
    return old if new is None else new


# ---------- handlers ----------

def quit_session(state: SessionState, console: Console, service: ProjectService) -> SessionState:
    console.out("\nExiting the menu.")
    console.out("Goodbye!")
    return replace(state, done=True)


def create_project(state: SessionState, console: Console, service: ProjectService) -> SessionState:
    name = console.get_string("\nEnter the project name")
    if name is None:
        raise InputError("A project name is required.")
    estimated_hours = console.get_decimal("\nEnter the estimated hours")
    actual_hours = console.get_decimal("\nEnter the actual hours")
    difficulty = console.get_difficulty()
    notes = console.get_string("\nEnter the project notes")

    project = Project(
        project_id=None,
        project_name=name,
        estimated_hours=estimated_hours,
        actual_hours=actual_hours,
        difficulty=difficulty,
        notes=notes,
    )
    result = service.add_project(project)
    if not result.ok:
        console.out(f"\nError: {result.message}")
        return state
    saved = result.project
    console.out(f"\nYou have successfully created project {saved.project_id}: {saved.project_name}")
    return state


def list_projects(state: SessionState, console: Console, service: ProjectService) -> SessionState:
    _print_projects(console, service)
    return state


def select_project(state: SessionState, console: Console, service: ProjectService) -> SessionState:
    _print_projects(console, service)
    project_id = console.get_int(
        "Select a project from the above list by entering its ID (the number to its left)"
    )
    if project_id is None:
        console.out("\nNo project ID was entered.")
        return state

    # a new selection fetch drops the old selection first
    state = replace(state, selected=None)
    result = service.fetch_project_by_id(project_id)
    if not result.ok:
        console.out(f"\nError: {result.message}")
        return state
    console.out(f"\nYou have selected {result.project.project_name}")
    return replace(state, selected=result.project)


def view_project(state: SessionState, console: Console, service: ProjectService) -> SessionState:
    if state.selected is None:
        console.out(NO_SELECTION_GUIDANCE)
        return state
    console.out("\nHere are the details of the currently selected project:")
    console.out(state.selected.details())
    return state


def update_project(state: SessionState, console: Console, service: ProjectService) -> SessionState:
    current = state.selected
    if current is None:
        console.out(NO_SELECTION_GUIDANCE)
        return state

    name = console.get_string(f"Enter the project name [{current.project_name}]")
    estimated_hours = console.get_decimal(f"Enter the estimated hours [{current.estimated_hours}]")
    actual_hours = console.get_decimal(f"Enter the actual hours [{current.actual_hours}]")
    difficulty = console.get_difficulty(current.difficulty, show_current=True)
    notes = console.get_string(f"Enter the project notes [{current.notes}]")

    updated = Project(
        project_id=current.project_id,
        project_name=_keep(name, current.project_name),
        estimated_hours=_keep(estimated_hours, current.estimated_hours),
        actual_hours=_keep(actual_hours, current.actual_hours),
        difficulty=_keep(difficulty, current.difficulty),
        notes=_keep(notes, current.notes),
    )
    result = service.modify_project_details(updated)
    if not result.ok:
        console.out(f"\nError: {result.message}")
        return state

    refreshed = service.fetch_project_by_id(current.project_id)
    if not refreshed.ok:
        console.out(f"\nError: {refreshed.message}")
        return replace(state, selected=None)
    console.out(f"\nProject {current.project_id} was updated.")
    return replace(state, selected=refreshed.project)


def delete_project(state: SessionState, console: Console, service: ProjectService) -> SessionState:
    _print_projects(console, service)
    project_id = console.get_int("Enter the ID of the project to delete")
    if project_id is None:
        console.out("\nNo project ID was entered.")
        return state
    if not console.confirm(f"Are you sure you want to delete project {project_id}?"):
        console.out("\nDelete cancelled.")
        return state

    result = service.delete_project(project_id)
    if not result.ok:
        console.out(f"\nError: {result.message}")
        return state
    console.out(f"\n{result.message}")
    if state.selected is not None and state.selected.project_id == project_id:
        return replace(state, selected=None)
    return state


# ---------- menu ----------

OPERATIONS: List[Tuple[int, str, Handler]] = [
    (1, "Quit this application", quit_session),
    (2, "Add a new project", create_project),
    (3, "List projects", list_projects),
    (4, "Select a project", select_project),
    (5, "View selected project details", view_project),
    (6, "Update project details", update_project),
    (7, "Delete a project", delete_project),
]

HANDLERS: Dict[int, Handler] = {number: handler for number, _, handler in OPERATIONS}


def print_operations(state: SessionState, console: Console) -> None:
    console.out("\nWhat do you wish to do?")
    for number, label, _ in OPERATIONS:
        console.out(f"   {number}) {label}")
    if state.selected is None:
        console.out("\nThere is no project currently selected.")
    else:
        console.out(f"\nThe currently selected project is: {state.selected.project_name}")


def dispatch(state: SessionState, console: Console, service: ProjectService) -> SessionState:
    """Show the menu, read one selection and run its handler."""
    print_operations(state, console)
    selection = console.get_int("Enter the number of one of the above menu items to continue")
    selection = -1 if selection is None else selection
    handler = HANDLERS.get(selection)
    if handler is None:
        console.out(f"\n{selection} is not a valid selection. Try again.")
        return state
    _log.debug("Menu selection %s (%s)", selection, handler.__name__)
    return handler(state, console, service)


def run_session(console: Console, service: ProjectService, state: Optional[SessionState] = None) -> SessionState:
    """Loop until quit. Errors from an action are reported and the loop continues."""
    state = state or SessionState()
    while not state.done:
        try:
            state = dispatch(state, console, service)
        except (EOFError, KeyboardInterrupt):
            _log.info("Input closed; ending session")
            state = quit_session(state, console, service)
        except Exception as e:
            # the loop is the top-level error boundary
            _log.warning("Menu action failed: %s", e, exc_info=not isinstance(e, InputError))
            console.out(f"\nError: {e} Try again.")
    return state
