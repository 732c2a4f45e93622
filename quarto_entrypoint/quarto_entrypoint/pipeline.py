"""Sequential render-and-relocate pipeline."""

from __future__ import annotations

import logging
from pathlib import Path

from .core.errors import MissingMount
from .core.models import OutputPlan, RenderRequest
from .relocation import artifacts, extras
from .rendering import invoker
from .resolution import layout, paths, project

logger = logging.getLogger(__name__)


def check_mounts(request: RenderRequest) -> None:
    """Make sure both bind mounts are present before touching anything."""
    if not request.source_root.is_dir():
        raise MissingMount(request.source_root, "source")
    if not request.output_root.is_dir():
        raise MissingMount(request.output_root, "output")


def run(request: RenderRequest) -> list[OutputPlan]:
    """Render every resolved document and move the results to the output root.

    Documents are handled one at a time: the renderer writes its generated
    folders under fixed names, so document N is fully relocated before
    document N+1 is rendered.

    Args:
        request: Run configuration

    Returns:
        Output plan of every rendered document, in rendering order
    """
    check_mounts(request)

    document_set = paths.resolve(
        request.input_spec, request.source_root, policy=request.batch_policy
    )
    parent = document_set.parent_directory
    project_info = project.inspect(parent)

    plans: list[OutputPlan] = []
    prepared: set[Path] = set()

    for document in document_set.documents:
        plan = OutputPlan(
            output_directory=layout.plan(
                parent, request.source_root, request.output_root
            )
        )
        logger.info(f"Rendering {parent / document} to the {plan.output_directory} folder")

        outcome = invoker.invoke(
            parent / document,
            request.log_file,
            output_format=request.output_format,
            log_level=request.log_level,
            quarto_bin=request.quarto_bin,
        )
        artifacts.relocate(
            parent,
            plan.output_directory,
            document,
            outcome,
            output_root=request.output_root,
            reset_output=plan.output_directory not in prepared,
            project=project_info,
        )
        prepared.add(plan.output_directory)
        plans.append(plan)

    if request.files_to_copy or request.folders_to_copy:
        extras.copy_extras(
            parent,
            plans[-1].output_directory,
            request.files_to_copy,
            request.folders_to_copy,
        )

    logger.info(f"Successfully rendered {len(plans)} document(s)")
    return plans
