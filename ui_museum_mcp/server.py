"""
UI Museum MCP Server
Run with: python -m ui_museum_mcp

Exposes the catalog to MCP clients:
- Element and component search
- Entity lookups (elements, components, themes, zones)
- Category and layer browsing
- Description-based component suggestions
"""

import asyncio
import json
import logging

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent

from .accessors import get_accessors
from .catalog import Layer
from .config import get_config

logger = logging.getLogger(__name__)

config = get_config()

# Create MCP server
app = Server(config.server_name)


def _json_result(data) -> list[TextContent]:
    return [TextContent(type="text", text=json.dumps(data, indent=2))]


def _require(arguments: dict, key: str) -> str:
    value = arguments.get(key)
    if not value:
        raise ValueError(f"Missing '{key}' parameter")
    return value


def _text(arguments: dict, key: str, required: bool = False):
    """Optional string argument; "" is a valid value"""
    value = arguments.get(key)
    if value is None:
        if required:
            raise ValueError(f"Missing '{key}' parameter")
        return None
    if not isinstance(value, str):
        raise ValueError(f"Invalid {key}: {value!r}")
    return value


def _tags(arguments: dict):
    value = arguments.get("tags")
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(t, str) for t in value):
        raise ValueError(f"Invalid tags: {value!r}")
    return value


def _flag(arguments: dict, key: str):
    value = arguments.get(key)
    if value is not None and not isinstance(value, bool):
        raise ValueError(f"Invalid {key}: {value!r}")
    return value


def _limit(arguments: dict, default: int) -> int:
    value = arguments.get("limit")
    if value is None:
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid limit: {value!r}")


def _layer(value):
    if value is None:
        return None
    layer = Layer.parse(value)
    if layer is None:
        raise ValueError(f"Invalid layer: {value}")
    return layer


LAYER_SCHEMA = {
    "type": "string",
    "enum": [layer.value for layer in Layer],
    "description": "Atomic-design layer"
}

LIMIT_SCHEMA = {
    "type": "integer",
    "description": "Maximum number of results"
}


@app.list_tools()
async def list_tools() -> list[Tool]:
    """List available tools"""
    return [
        # Search
        Tool(
            name="search_elements",
            description="Search UI elements by text, layer, category or tags",
            inputSchema={
                "type": "object",
                "properties": {
                    "query": {
                        "type": "string",
                        "description": "Text matched against name, description and tags"
                    },
                    "layer": LAYER_SCHEMA,
                    "category": {
                        "type": "string",
                        "description": "Element category (e.g. 'buttons', 'cards')"
                    },
                    "tags": {
                        "type": "array",
                        "items": {"type": "string"},
                        "description": "At least one of these tags must be present"
                    },
                    "limit": LIMIT_SCHEMA
                }
            }
        ),
        Tool(
            name="search_components",
            description="Search zone gallery components by text, zone, category, tags or interactivity",
            inputSchema={
                "type": "object",
                "properties": {
                    "query": {
                        "type": "string",
                        "description": "Text matched against name, description and tags"
                    },
                    "zone": {
                        "type": "string",
                        "description": "Zone id (e.g. 'arcade', 'cosmic')"
                    },
                    "category": {
                        "type": "string",
                        "description": "Component category (e.g. 'progress', 'toys')"
                    },
                    "tags": {
                        "type": "array",
                        "items": {"type": "string"},
                        "description": "At least one of these tags must be present"
                    },
                    "is_interactive": {
                        "type": "boolean",
                        "description": "Only interactive (true) or static (false) components"
                    },
                    "limit": LIMIT_SCHEMA
                }
            }
        ),
        Tool(
            name="suggest_components",
            description="Suggest UI elements for a description of what you are building",
            inputSchema={
                "type": "object",
                "properties": {
                    "description": {
                        "type": "string",
                        "description": "What you are building (e.g. 'landing page with pricing')"
                    },
                    "aesthetic": {
                        "type": "string",
                        "description": "Optional style hint used to pick a zone (e.g. 'neon', 'retro')"
                    },
                    "limit": LIMIT_SCHEMA
                },
                "required": ["description"]
            }
        ),

        # Lookups
        Tool(
            name="get_element",
            description="Get an element by id, with its composition and the elements that use it",
            inputSchema={
                "type": "object",
                "properties": {
                    "id": {"type": "string", "description": "Element id"}
                },
                "required": ["id"]
            }
        ),
        Tool(
            name="get_component",
            description="Get a zone gallery component by id",
            inputSchema={
                "type": "object",
                "properties": {
                    "id": {"type": "string", "description": "Component id"}
                },
                "required": ["id"]
            }
        ),
        Tool(
            name="similar_components",
            description="Find components related to a component by zone, categories and tags",
            inputSchema={
                "type": "object",
                "properties": {
                    "id": {"type": "string", "description": "Component id"},
                    "limit": LIMIT_SCHEMA
                },
                "required": ["id"]
            }
        ),

        # Browsing
        Tool(
            name="list_categories",
            description="List element categories with counts and layers",
            inputSchema={
                "type": "object",
                "properties": {}
            }
        ),
        Tool(
            name="get_elements_by_layer",
            description="Get all elements of an atomic-design layer",
            inputSchema={
                "type": "object",
                "properties": {
                    "layer": LAYER_SCHEMA
                },
                "required": ["layer"]
            }
        ),

        # Themes
        Tool(
            name="list_themes",
            description="List available color themes",
            inputSchema={
                "type": "object",
                "properties": {}
            }
        ),
        Tool(
            name="get_theme",
            description="Get a theme and its full color palette",
            inputSchema={
                "type": "object",
                "properties": {
                    "id": {"type": "string", "description": "Theme id"}
                },
                "required": ["id"]
            }
        ),

        # Zones
        Tool(
            name="list_zones",
            description="List themed zones, optionally filtered by name, aesthetic or tag",
            inputSchema={
                "type": "object",
                "properties": {
                    "query": {
                        "type": "string",
                        "description": "Optional filter text"
                    }
                }
            }
        ),
        Tool(
            name="get_zone",
            description="Get a zone by id",
            inputSchema={
                "type": "object",
                "properties": {
                    "id": {"type": "string", "description": "Zone id"}
                },
                "required": ["id"]
            }
        ),
        Tool(
            name="get_zone_components",
            description="Get elements that fit a zone's style",
            inputSchema={
                "type": "object",
                "properties": {
                    "zone_id": {"type": "string", "description": "Zone id"},
                    "layer": LAYER_SCHEMA,
                    "limit": LIMIT_SCHEMA
                },
                "required": ["zone_id"]
            }
        ),
    ]


@app.call_tool()
async def call_tool(name: str, arguments: dict) -> list[TextContent]:
    """Handle tool calls"""
    arguments = arguments or {}
    accessors = get_accessors()
    search_limit = config.search_limit

    try:
        # Search
        if name == "search_elements":
            elements = accessors.search_elements(
                query=_text(arguments, "query"),
                layer=_layer(arguments.get("layer")),
                category=_text(arguments, "category"),
                tags=_tags(arguments),
                limit=_limit(arguments, search_limit),
            )
            return _json_result({"count": len(elements), "elements": elements})

        elif name == "search_components":
            components = accessors.search_components(
                query=_text(arguments, "query"),
                zone=_text(arguments, "zone"),
                category=_text(arguments, "category"),
                tags=_tags(arguments),
                is_interactive=_flag(arguments, "is_interactive"),
                limit=_limit(arguments, search_limit),
            )
            return _json_result({"count": len(components), "components": components})

        elif name == "suggest_components":
            description = _text(arguments, "description", required=True)
            result = accessors.suggest_components(
                description,
                aesthetic=_text(arguments, "aesthetic"),
                limit=_limit(arguments, config.suggest_limit),
            )
            return _json_result(result)

        # Lookups
        elif name == "get_element":
            element_id = _require(arguments, "id")
            element = accessors.get_element(element_id)
            if element is None:
                raise LookupError(f"Element not found: {element_id}")
            element["composition"] = [e["id"] for e in accessors.get_element_composition(element_id)]
            element["used_in"] = [e["id"] for e in accessors.get_element_usage(element_id)]
            return _json_result(element)

        elif name == "get_component":
            component_id = _require(arguments, "id")
            component = accessors.get_component(component_id)
            if component is None:
                raise LookupError(f"Component not found: {component_id}")
            zone = accessors.get_zone_by_id(component["zone"])
            component["zone_name"] = zone["name"] if zone else None
            return _json_result(component)

        elif name == "similar_components":
            component_id = _require(arguments, "id")
            if accessors.get_component(component_id) is None:
                raise LookupError(f"Component not found: {component_id}")
            similar = accessors.similar_components(component_id, _limit(arguments, 5))
            return _json_result({
                "component_id": component_id,
                "count": len(similar),
                "components": similar,
            })

        # Browsing
        elif name == "list_categories":
            return _json_result(accessors.get_categories())

        elif name == "get_elements_by_layer":
            layer = _layer(_require(arguments, "layer"))
            elements = accessors.get_elements_by_layer(layer)
            return _json_result({"layer": layer.value, "count": len(elements), "elements": elements})

        # Themes
        elif name == "list_themes":
            themes = [
                {
                    "id": t["id"],
                    "name": t["name"],
                    "description": t["description"],
                    "primary_color": t["colors"].get("primary"),
                }
                for t in accessors.list_themes()
            ]
            return _json_result({"count": len(themes), "themes": themes})

        elif name == "get_theme":
            theme_id = _require(arguments, "id")
            theme = accessors.get_theme_by_id(theme_id)
            if theme is None:
                raise LookupError(f"Theme not found: {theme_id}")
            return _json_result(theme)

        # Zones
        elif name == "list_zones":
            zones = [
                {
                    "id": z["id"],
                    "name": z["name"],
                    "description": z["description"],
                    "aesthetic": z["aesthetic"],
                    "component_count": z["component_count"],
                    "tags": z["tags"],
                }
                for z in accessors.search_zones(_text(arguments, "query"))
            ]
            return _json_result({"count": len(zones), "zones": zones})

        elif name == "get_zone":
            zone_id = _require(arguments, "id")
            zone = accessors.get_zone_by_id(zone_id)
            if zone is None:
                raise LookupError(f"Zone not found: {zone_id}")
            return _json_result(zone)

        elif name == "get_zone_components":
            zone_id = _require(arguments, "zone_id")
            elements = accessors.get_zone_components(
                zone_id,
                layer=_layer(arguments.get("layer")),
                limit=_limit(arguments, search_limit),
            )
            if elements is None:
                raise LookupError(f"Zone not found: {zone_id}")
            zone = accessors.get_zone_by_id(zone_id)
            return _json_result({
                "zone": zone["name"],
                "zone_id": zone_id,
                "count": len(elements),
                "elements": elements,
            })

        else:
            raise ValueError(f"Unknown tool: {name}")

    except (ValueError, LookupError) as e:
        logger.warning("Tool %s failed: %s", name, e)
        return [TextContent(type="text", text=f"Error: {str(e)}")]
    except Exception as e:
        logger.exception("Tool %s raised unexpectedly", name)
        return [TextContent(type="text", text=f"Error: {str(e)}")]


async def main():
    """Run the server"""
    logger.info("Starting %s MCP server", config.server_name)
    async with stdio_server() as (read_stream, write_stream):
        await app.run(
            read_stream,
            write_stream,
            app.create_initialization_options()
        )


if __name__ == "__main__":
    asyncio.run(main())
