"""
Links component - ordered link collections for the public profile page.
"""

from ._export import export_filename, export_json, export_owner
from ._impl import (
    DEFAULT_ICON_NAMES,
    URL_PATTERN,
    LinkService,
    validate_link_data,
    validate_url,
)
from ._search import filter_by_title
from ._view import LinkCollectionView
from .component import (
    errors_from,
    run_create,
    run_delete,
    run_get,
    run_list,
    run_reorder,
    run_toggle,
    run_update,
)
from .models import (
    CreateLinkInput,
    DeleteLinkInput,
    ExportData,
    GetLinkInput,
    IconInput,
    LinkListOutput,
    LinkOperationOutput,
    LinkValidationError,
    ListLinksInput,
    ReorderLinksInput,
    ToggleLinkInput,
    UpdateLinkInput,
)
from .ports import LinkRepoPort, OwnerLookupPort

__all__ = [
    # Entry points
    "run_create",
    "run_update",
    "run_toggle",
    "run_delete",
    "run_get",
    "run_list",
    "run_reorder",
    "errors_from",
    # Input models
    "CreateLinkInput",
    "UpdateLinkInput",
    "ToggleLinkInput",
    "DeleteLinkInput",
    "GetLinkInput",
    "ListLinksInput",
    "ReorderLinksInput",
    "IconInput",
    # Output models
    "LinkOperationOutput",
    "LinkListOutput",
    "LinkValidationError",
    "ExportData",
    # Ports
    "LinkRepoPort",
    "OwnerLookupPort",
    # Core
    "LinkService",
    "LinkCollectionView",
    "filter_by_title",
    "validate_link_data",
    "validate_url",
    "URL_PATTERN",
    "DEFAULT_ICON_NAMES",
    # Export
    "export_owner",
    "export_filename",
    "export_json",
]
