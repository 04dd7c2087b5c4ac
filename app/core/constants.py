"""Core constants: permission capabilities required by the role routes.

Single source of truth for capability strings (DRY). Routes declare them via
require_permission(); the permission resolver decides who holds them.
"""

ROLE_CREATE = "role:create"
ROLE_UPDATE = "role:update"
ROLE_GET_BY_ID = "role:getbyid"
ROLE_LIST = "role:list"
ROLE_DELETE = "role:delete"
ROLE_ADD_PERMISSION = "role:addpermission"
ROLE_DELETE_PERMISSION = "role:deletepermission"

ROLE_CAPABILITIES = (
    ROLE_CREATE,
    ROLE_UPDATE,
    ROLE_GET_BY_ID,
    ROLE_LIST,
    ROLE_DELETE,
    ROLE_ADD_PERMISSION,
    ROLE_DELETE_PERMISSION,
)
