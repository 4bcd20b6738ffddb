"""Text descriptions of the current project."""

from __future__ import annotations

import json
from dataclasses import asdict

from modelhelper.converter import CodeModelConverter, ProjectConfig

NO_PROJECT = "No project exists here \n"
MODEL_IDENTIFIER = "model"

_FEATURES = ("auth", "logger", "tracing", "swagger", "metrics", "health", "api", "db")


def _uses(project: ProjectConfig, feature: str) -> bool:
    if project.features is None:
        return False
    toggle = getattr(project.features, feature)
    return toggle is not None and toggle.use


def format_project_info(project: ProjectConfig | None) -> str:
    """Return a readable summary of a project; None means there is no project."""
    if project is None:
        return NO_PROJECT

    uses = {
        feature: "true" if _uses(project, feature) else "false" for feature in _FEATURES
    }
    parts = [
        f"Name: {project.name}\n",
        f"Description: {project.description}\n",
        f"Language: {project.language}\n",
        f"Root namespace: {project.root_namespace}\n",
        f"Owner: {project.owner_name}\n",
        "\nFeatures\n",
        f"\tAuth:\t\t{uses['auth']}",
        f"\n\tLogger:\t\t{uses['logger']}",
        f"\n\tTracing:\t{uses['tracing']}\n",
        f"\tSwagger:\t{uses['swagger']}\n",
        f"\tMetrics:\t{uses['metrics']}\n",
        f"\tHealth:\t\t{uses['health']}\n",
        f"\tApi:\t\t{uses['api']}\n",
        f"\tDb:\t\t{uses['db']}\n",
    ]
    parts += [
        f"{key}: {feature.namespace}\n" for key, feature in project.custom_features.items()
    ]

    parts.append("\nSetup\n")
    parts += [
        f"\t{key}: {{namespace: {setup.namespace}, prefix: {setup.prefix}, "
        f"postfix: {setup.postfix}}}\n"
        for key, setup in project.setup.items()
    ]

    parts.append("\nCode Export Locations\n")
    if not project.locations:
        parts.append("\tNo locations set\n")
    else:
        parts += [f"\t{key}: {value}\n" for key, value in project.locations.items()]

    if project.inject:
        parts.append("\nInject\n")
        parts += [
            f"\t{key}: {{property: {item.property_name}, name: {item.name}, "
            f"method: {item.method}}}\n"
            for key, item in project.inject.items()
        ]

    if project.options:
        parts.append("\nOptions\n")
        parts += [f"\t{key}: {value}\n" for key, value in project.options.items()]

    return "".join(parts)


def format_project_model(project: ProjectConfig | None) -> str:
    """Return the project's basic template model as indented JSON."""
    if project is None:
        return NO_PROJECT
    model = CodeModelConverter().to_basic_model(MODEL_IDENTIFIER, project.language, project)
    text = json.dumps(asdict(model), indent=2, default=str)
    return f"Project as model\n\n {text}\n"