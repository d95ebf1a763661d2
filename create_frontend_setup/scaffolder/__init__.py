"""create-frontend-setup scaffolder -- turns a directory into a React + Vite app.

Runs the Vite project generator through the selected package manager,
installs Redux Toolkit, react-redux, Axios, react-hot-toast and Sass, then
writes a fixed folder layout and set of template files on top.

Quick usage::

    from create_frontend_setup.config import ScaffoldRequest
    from create_frontend_setup.scaffolder import ProjectGenerator

    request = ScaffoldRequest(app_name="demo", package_manager="pnpm")
    project_path = await ProjectGenerator(request).generate()
"""

from create_frontend_setup.scaffolder.generator import (
    DirectoryNotEmptyError,
    ExternalProcessError,
    ProjectGenerator,
    ScaffoldError,
    ScaffoldFileSystemError,
)
from create_frontend_setup.scaffolder.templates import TemplateFile, TemplateWriter

__all__ = [
    "DirectoryNotEmptyError",
    "ExternalProcessError",
    "ProjectGenerator",
    "ScaffoldError",
    "ScaffoldFileSystemError",
    "TemplateFile",
    "TemplateWriter",
]
