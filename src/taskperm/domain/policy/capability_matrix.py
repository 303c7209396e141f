"""Capability matrices - which actions each role and override level permits.

Each table is authored verbatim. Levels are not assumed to nest: every
level lists its own actions, and monotonicity is checked by tests.
"""

from types import MappingProxyType

from taskperm.domain.value_objects import OverrideLevel, PermissionAction as A, WorkspaceRole

ROLE_PERMISSIONS = MappingProxyType({
    WorkspaceRole.OWNER: frozenset({
        # Workspace
        A.DELETE_WORKSPACE,
        A.UPDATE_WORKSPACE,
        A.INVITE_MEMBER,
        A.REMOVE_MEMBER,
        A.CHANGE_MEMBER_ROLE,
        A.VIEW_WORKSPACE,
        A.LEAVE_WORKSPACE,
        # Space
        A.CREATE_SPACE,
        A.DELETE_SPACE,
        A.UPDATE_SPACE,
        A.VIEW_SPACE,
        A.ADD_SPACE_MEMBER,
        A.REMOVE_SPACE_MEMBER,
        A.MANAGE_SPACE_PERMISSIONS,
        # Folder
        A.CREATE_FOLDER,
        A.DELETE_FOLDER,
        A.UPDATE_FOLDER,
        A.VIEW_FOLDER,
        # List
        A.CREATE_LIST,
        A.DELETE_LIST,
        A.UPDATE_LIST,
        A.VIEW_LIST,
        # Task
        A.CREATE_TASK,
        A.DELETE_TASK,
        A.EDIT_TASK,
        A.VIEW_TASK,
        A.ASSIGN_TASK,
        A.CHANGE_STATUS,
        A.COMMENT_TASK,
        # Settings
        A.MANAGE_SETTINGS,
        A.VIEW_ANALYTICS,
        A.VIEW_ACTIVITY_LOG,
    }),
    WorkspaceRole.ADMIN: frozenset({
        # Workspace
        A.INVITE_MEMBER,
        A.REMOVE_MEMBER,
        A.VIEW_WORKSPACE,
        A.LEAVE_WORKSPACE,
        # Space
        A.CREATE_SPACE,
        A.DELETE_SPACE,
        A.UPDATE_SPACE,
        A.VIEW_SPACE,
        A.ADD_SPACE_MEMBER,
        A.REMOVE_SPACE_MEMBER,
        A.MANAGE_SPACE_PERMISSIONS,
        # Folder
        A.CREATE_FOLDER,
        A.DELETE_FOLDER,
        A.UPDATE_FOLDER,
        A.VIEW_FOLDER,
        # List
        A.CREATE_LIST,
        A.DELETE_LIST,
        A.UPDATE_LIST,
        A.VIEW_LIST,
        # Task
        A.CREATE_TASK,
        A.DELETE_TASK,
        A.EDIT_TASK,
        A.VIEW_TASK,
        A.ASSIGN_TASK,
        A.CHANGE_STATUS,
        A.COMMENT_TASK,
        # Settings
        A.VIEW_ANALYTICS,
        A.VIEW_ACTIVITY_LOG,
    }),
    WorkspaceRole.MEMBER: frozenset({
        # Workspace
        A.VIEW_WORKSPACE,
        A.LEAVE_WORKSPACE,
        # Space, folder and list: view only until an override is assigned
        A.VIEW_SPACE,
        A.VIEW_FOLDER,
        A.VIEW_LIST,
        # Task - EDIT_TASK and CHANGE_STATUS are narrowed to the assignee
        A.VIEW_TASK,
        A.COMMENT_TASK,
        A.EDIT_TASK,
        A.CHANGE_STATUS,
        # Settings
        A.VIEW_ACTIVITY_LOG,
    }),
    WorkspaceRole.GUEST: frozenset({
        A.VIEW_WORKSPACE,
        A.VIEW_SPACE,
        A.VIEW_FOLDER,
        A.VIEW_LIST,
        A.VIEW_TASK,
        A.COMMENT_TASK,
    }),
})

SPACE_OVERRIDE_ACTIONS = MappingProxyType({
    OverrideLevel.FULL: frozenset({
        A.UPDATE_SPACE,
        A.VIEW_SPACE,
        A.CREATE_FOLDER,
        A.DELETE_FOLDER,
        A.UPDATE_FOLDER,
        A.VIEW_FOLDER,
        A.CREATE_LIST,
        A.DELETE_LIST,
        A.UPDATE_LIST,
        A.VIEW_LIST,
        A.CREATE_TASK,
        A.DELETE_TASK,
        A.EDIT_TASK,
        A.VIEW_TASK,
        A.ASSIGN_TASK,
        A.CHANGE_STATUS,
        A.COMMENT_TASK,
        A.VIEW_ACTIVITY_LOG,
    }),
    OverrideLevel.EDIT: frozenset({
        A.VIEW_SPACE,
        A.VIEW_FOLDER,
        A.VIEW_LIST,
        A.CREATE_TASK,
        A.EDIT_TASK,
        A.VIEW_TASK,
        A.CHANGE_STATUS,
        A.COMMENT_TASK,
        A.VIEW_ACTIVITY_LOG,
    }),
    OverrideLevel.COMMENT: frozenset({
        A.VIEW_SPACE,
        A.VIEW_FOLDER,
        A.VIEW_LIST,
        A.VIEW_TASK,
        A.COMMENT_TASK,
    }),
    OverrideLevel.VIEW: frozenset({
        A.VIEW_SPACE,
        A.VIEW_FOLDER,
        A.VIEW_LIST,
        A.VIEW_TASK,
    }),
})

FOLDER_OVERRIDE_ACTIONS = MappingProxyType({
    OverrideLevel.FULL: frozenset({
        A.UPDATE_FOLDER,
        A.VIEW_FOLDER,
        A.CREATE_LIST,
        A.DELETE_LIST,
        A.UPDATE_LIST,
        A.VIEW_LIST,
        A.CREATE_TASK,
        A.DELETE_TASK,
        A.EDIT_TASK,
        A.VIEW_TASK,
        A.ASSIGN_TASK,
        A.CHANGE_STATUS,
        A.COMMENT_TASK,
        A.VIEW_ACTIVITY_LOG,
    }),
    OverrideLevel.EDIT: frozenset({
        A.VIEW_FOLDER,
        A.VIEW_LIST,
        A.CREATE_TASK,
        A.EDIT_TASK,
        A.VIEW_TASK,
        A.CHANGE_STATUS,
        A.COMMENT_TASK,
        A.VIEW_ACTIVITY_LOG,
    }),
    OverrideLevel.COMMENT: frozenset({
        A.VIEW_FOLDER,
        A.VIEW_LIST,
        A.VIEW_TASK,
        A.COMMENT_TASK,
    }),
    OverrideLevel.VIEW: frozenset({
        A.VIEW_FOLDER,
        A.VIEW_LIST,
        A.VIEW_TASK,
    }),
})

LIST_OVERRIDE_ACTIONS = MappingProxyType({
    OverrideLevel.FULL: frozenset({
        A.UPDATE_LIST,
        A.VIEW_LIST,
        A.CREATE_TASK,
        A.DELETE_TASK,
        A.EDIT_TASK,
        A.VIEW_TASK,
        A.ASSIGN_TASK,
        A.CHANGE_STATUS,
        A.COMMENT_TASK,
        A.VIEW_ACTIVITY_LOG,
    }),
    OverrideLevel.EDIT: frozenset({
        A.VIEW_LIST,
        A.CREATE_TASK,
        A.EDIT_TASK,
        A.VIEW_TASK,
        A.CHANGE_STATUS,
        A.COMMENT_TASK,
        A.VIEW_ACTIVITY_LOG,
    }),
    OverrideLevel.COMMENT: frozenset({
        A.VIEW_LIST,
        A.VIEW_TASK,
        A.COMMENT_TASK,
    }),
    OverrideLevel.VIEW: frozenset({
        A.VIEW_LIST,
        A.VIEW_TASK,
    }),
})

# Actions narrowed to the task assignee when an assignee is known.
ASSIGNEE_GATED_ACTIONS = frozenset({A.EDIT_TASK, A.CHANGE_STATUS})

__all__ = [
    "ASSIGNEE_GATED_ACTIONS",
    "FOLDER_OVERRIDE_ACTIONS",
    "LIST_OVERRIDE_ACTIONS",
    "ROLE_PERMISSIONS",
    "SPACE_OVERRIDE_ACTIONS",
]
