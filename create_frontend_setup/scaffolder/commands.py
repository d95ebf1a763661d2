"""Package-manager command tables.

Each supported manager has its own incantation for running the Vite project
generator; install and add commands share one shape across managers.
"""

from __future__ import annotations

from create_frontend_setup.config import PackageManager


# ---------------------------------------------------------------------------
# Dependencies added on top of the Vite React template
# ---------------------------------------------------------------------------

DEV_DEPENDENCIES: list[str] = ["sass"]

DEPENDENCIES: list[str] = [
    "@reduxjs/toolkit",
    "react-redux",
    "axios",
    "react-hot-toast",
]

VITE_TEMPLATE = "react"


def generator_command(manager: PackageManager, app_name: str) -> list[str]:
    """Return the argv that creates a Vite + React project named *app_name*.

    npm needs ``--`` to forward ``--template`` to create-vite; bun has no
    ``create`` shortcut and runs the package through ``bun x``.
    """
    if manager is PackageManager.PNPM:
        return ["pnpm", "create", "vite", app_name, "--template", VITE_TEMPLATE]
    if manager is PackageManager.YARN:
        return ["yarn", "create", "vite", app_name, "--template", VITE_TEMPLATE]
    if manager is PackageManager.BUN:
        return ["bun", "x", "create-vite", app_name, "--template", VITE_TEMPLATE]
    return ["npm", "create", "vite@latest", app_name, "--", "--template", VITE_TEMPLATE]


def install_commands(manager: PackageManager) -> list[list[str]]:
    """Return the install/add commands, in the order they must run."""
    pm = manager.value
    return [
        [pm, "install"],
        [pm, "add", "-D", *DEV_DEPENDENCIES],
        [pm, "add", *DEPENDENCIES],
    ]


def dev_command(manager: PackageManager) -> str:
    """The command a user runs to start the dev server afterwards."""
    return f"{manager.value} run dev"
