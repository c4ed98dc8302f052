ALL_ROLE_TOOLS = [
    {
        "name": "create_role",
        "description": "Create a new role in the server. Requires owner permissions.",
        "input_schema": {
            "type": "object",
            "properties": {
                "role_name": {
                    "type": "string",
                    "description": "Name for the new role."
                },
                "color": {
                    "type": "string",
                    "description": "Hex color code for the role (e.g. #FF6B35)."
                },
                "hoist": {
                    "type": "boolean",
                    "description": "Display role members separately in the member list."
                }
            },
            "required": ["role_name"]
        }
    },
    {
        "name": "delete_role",
        "description": "Delete a role from the server. Requires owner permissions.",
        "input_schema": {
            "type": "object",
            "properties": {
                "role_name": {
                    "type": "string",
                    "description": "Name of the role to delete."
                }
            },
            "required": ["role_name"]
        }
    },
    {
        "name": "rename_role",
        "description": "Rename an existing role. Requires owner permissions.",
        "input_schema": {
            "type": "object",
            "properties": {
                "old_name": {
                    "type": "string",
                    "description": "Current name of the role."
                },
                "new_name": {
                    "type": "string",
                    "description": "New name for the role."
                }
            },
            "required": ["old_name", "new_name"]
        }
    },
    {
        "name": "set_role_color",
        "description": "Change the color of a role. Requires owner permissions.",
        "input_schema": {
            "type": "object",
            "properties": {
                "role_name": {
                    "type": "string",
                    "description": "Name of the role."
                },
                "color": {
                    "type": "string",
                    "description": "Hex color code (e.g. #FF6B35)."
                }
            },
            "required": ["role_name", "color"]
        }
    },
    {
        "name": "assign_role",
        "description": "Assign a role to a member. Anyone can request self-assignable roles for themselves. The owner can assign any role to anyone.",
        "input_schema": {
            "type": "object",
            "properties": {
                "role_name": {
                    "type": "string",
                    "description": "Name of the role to assign."
                },
                "user_id": {
                    "type": "string",
                    "description": "Discord user ID. If omitted, assigns to the requesting user."
                }
            },
            "required": ["role_name"]
        }
    },
    {
        "name": "remove_role",
        "description": "Remove a role from a member. Anyone can remove their own self-assignable roles.",
        "input_schema": {
            "type": "object",
            "properties": {
                "role_name": {
                    "type": "string",
                    "description": "Name of the role to remove."
                },
                "user_id": {
                    "type": "string",
                    "description": "Discord user ID. If omitted, removes from the requesting user."
                }
            },
            "required": ["role_name"]
        }
    },
    {
        "name": "set_role_permissions",
        "description": "Set permissions for a role (Admin, Moderator, etc.). Requires owner permissions.",
        "input_schema": {
            "type": "object",
            "properties": {
                "role_name": {
                    "type": "string",
                    "description": "Role to modify."
                },
                "permissions": {
                    "type": "string",
                    "description": "Permission bit value or comma-separated permission names."
                }
            },
            "required": ["role_name", "permissions"]
        }
    },
    {
        "name": "get_role_info",
        "description": "Get detailed information about a role including permissions, member count, color, position, and whether it's managed or hoisted.",
        "input_schema": {
            "type": "object",
            "properties": {
                "role_id": {
                    "type": "string",
                    "description": "Role ID to get information about."
                }
            },
            "required": ["role_id"]
        }
    },
    {
        "name": "get_role_members",
        "description": "Get all members who have a specific role with detailed information about each member.",
        "input_schema": {
            "type": "object",
            "properties": {
                "role_id": {
                    "type": "string",
                    "description": "Role ID to get members for."
                }
            },
            "required": ["role_id"]
        }
    },
    {
        "name": "update_role_permissions",
        "description": "Replace the permissions of a role. Cannot modify managed roles or roles above the bot's highest role. Requires Manage Roles permission.",
        "input_schema": {
            "type": "object",
            "properties": {
                "role_id": {
                    "type": "string",
                    "description": "Role ID to update."
                },
                "permissions": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Permission names (e.g. ['view_channel', 'send_messages', 'moderate_members'])."
                },
                "reason": {
                    "type": "string",
                    "description": "Reason for the update, shown in the Discord audit log."
                }
            },
            "required": ["role_id", "permissions"]
        }
    },
    {
        "name": "add_role_permission",
        "description": "Add specific permission(s) to a role without removing existing ones. Cannot modify managed roles or roles above the bot's highest role. Requires Manage Roles permission.",
        "input_schema": {
            "type": "object",
            "properties": {
                "role_id": {
                    "type": "string",
                    "description": "Role ID to update."
                },
                "permissions": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Permission names to ADD (e.g. ['manage_messages', 'mute_members'])."
                },
                "reason": {
                    "type": "string",
                    "description": "Reason for adding permissions, shown in the Discord audit log."
                }
            },
            "required": ["role_id", "permissions"]
        }
    },
    {
        "name": "remove_role_permission",
        "description": "Remove specific permission(s) from a role while keeping the others. Cannot modify managed roles or roles above the bot's highest role. Requires Manage Roles permission.",
        "input_schema": {
            "type": "object",
            "properties": {
                "role_id": {
                    "type": "string",
                    "description": "Role ID to update."
                },
                "permissions": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Permission names to REMOVE (e.g. ['manage_messages', 'mute_members'])."
                },
                "reason": {
                    "type": "string",
                    "description": "Reason for removing permissions, shown in the Discord audit log."
                }
            },
            "required": ["role_id", "permissions"]
        }
    },
    {
        "name": "reorder_roles",
        "description": "Change a role's position in the role hierarchy. Cannot move roles above the bot's highest role. Requires Manage Roles permission.",
        "input_schema": {
            "type": "object",
            "properties": {
                "role_id": {
                    "type": "string",
                    "description": "Role ID to reorder."
                },
                "new_position": {
                    "type": "integer",
                    "description": "New position in the hierarchy (0 = bottom)."
                },
                "reason": {
                    "type": "string",
                    "description": "Reason for reordering, shown in the Discord audit log."
                }
            },
            "required": ["role_id", "new_position"]
        }
    },
    {
        "name": "set_role_position",
        "description": "Alias for reorder_roles. Change a role's position in the role hierarchy. Cannot move roles above the bot's highest role. Requires Manage Roles permission.",
        "input_schema": {
            "type": "object",
            "properties": {
                "role_id": {
                    "type": "string",
                    "description": "Role ID to reorder."
                },
                "position": {
                    "type": "integer",
                    "description": "New position in the hierarchy (0 = bottom)."
                },
                "reason": {
                    "type": "string",
                    "description": "Reason for reordering, shown in the Discord audit log."
                }
            },
            "required": ["role_id", "position"]
        }
    },
    {
        "name": "hoist_role",
        "description": "Display role members separately in the member list (hoisted). Requires owner permissions.",
        "input_schema": {
            "type": "object",
            "properties": {
                "role_id": {
                    "type": "string",
                    "description": "Role ID to hoist."
                },
                "hoisted": {
                    "type": "boolean",
                    "description": "True to hoist (display separately), false to unhoist."
                },
                "reason": {
                    "type": "string",
                    "description": "Reason for the change, shown in the Discord audit log."
                }
            },
            "required": ["role_id", "hoisted"]
        }
    },
    {
        "name": "mentionable_role",
        "description": "Make a role mentionable or non-mentionable by everyone. Requires owner permissions.",
        "input_schema": {
            "type": "object",
            "properties": {
                "role_id": {
                    "type": "string",
                    "description": "Role ID to modify."
                },
                "mentionable": {
                    "type": "boolean",
                    "description": "True to make mentionable, false to make non-mentionable."
                },
                "reason": {
                    "type": "string",
                    "description": "Reason for the change, shown in the Discord audit log."
                }
            },
            "required": ["role_id", "mentionable"]
        }
    },
]

# Maps tool names to the guild-level Discord permissions required to expose that tool.
# Empty list means no special permission needed (available by default).
TOOL_PERMISSIONS = {
    "create_role": ["manage_roles"],
    "delete_role": ["manage_roles"],
    "rename_role": ["manage_roles"],
    "set_role_color": ["manage_roles"],
    "assign_role": ["manage_roles"],
    "remove_role": ["manage_roles"],
    "set_role_permissions": ["manage_roles"],
    "get_role_info": [],
    "get_role_members": [],
    "update_role_permissions": ["manage_roles"],
    "add_role_permission": ["manage_roles"],
    "remove_role_permission": ["manage_roles"],
    "reorder_roles": ["manage_roles"],
    "set_role_position": ["manage_roles"],
    "hoist_role": ["manage_roles"],
    "mentionable_role": ["manage_roles"],
}


def get_tool(name: str) -> dict | None:
    for tool in ALL_ROLE_TOOLS:
        if tool["name"] == name:
            return tool
    return None


def get_available_tools(guild_permissions) -> list[dict]:
    """Return role tool definitions filtered by the bot's guild permissions."""
    available = []
    for tool in ALL_ROLE_TOOLS:
        required = TOOL_PERMISSIONS.get(tool["name"], [])
        if all(getattr(guild_permissions, perm, False) for perm in required):
            available.append(tool)
    return available


def status_for_tool(name: str, tool_input: dict) -> str:
    """Return a user-facing status string for a role tool invocation."""
    role = tool_input.get("role_name") or tool_input.get("old_name")
    if name == "create_role":
        return f"Creating role {role or 'a role'}..."
    elif name == "delete_role":
        return f"Deleting role {role or 'a role'}..."
    elif name == "rename_role":
        return f"Renaming {role or 'a role'} to {tool_input.get('new_name', 'something new')}..."
    elif name == "set_role_color":
        return f"Recoloring {role or 'a role'}..."
    elif name == "assign_role":
        return f"Assigning {role or 'a role'}..."
    elif name == "remove_role":
        return f"Removing {role or 'a role'}..."
    elif name in ("get_role_info", "get_role_members"):
        return "Looking up role details..."
    elif name in ("set_role_permissions", "update_role_permissions",
                  "add_role_permission", "remove_role_permission"):
        return "Updating role permissions..."
    elif name in ("reorder_roles", "set_role_position"):
        return "Moving a role in the hierarchy..."
    elif name in ("hoist_role", "mentionable_role"):
        return "Updating role display settings..."
    return "Using a tool..."
