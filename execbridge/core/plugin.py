"""
Rendering of resolved commands as exec-maven-plugin configuration.

Element names follow the plugin's ``exec`` goal: ``executable``,
``arguments`` (with nested ``argument`` elements), ``workingDirectory``
and ``successCodes`` (with nested ``successCode`` elements).
"""

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Any

from execbridge.core.command import ResolvedCommand

EXEC_MAVEN_GROUP = "org.codehaus.mojo"
EXEC_MAVEN_ARTIFACT = "exec-maven-plugin"
EXEC_GOAL = "exec"
DEFAULT_EXEC_MAVEN_VERSION = "1.2.1"

EXECUTABLE_ELEMENT = "executable"
ARGUMENTS_ELEMENT = "arguments"
ARGUMENT_ELEMENT = "argument"
WORKING_DIRECTORY_ELEMENT = "workingDirectory"
EXEC_SUCCESS_CODES_ELEMENT = "successCodes"
EXEC_SUCCESS_CODE_ELEMENT = "successCode"


@dataclass(frozen=True)
class PluginCoordinates:
    """Maven coordinates and goal of the plugin that executes the command."""

    group_id: str = EXEC_MAVEN_GROUP
    artifact_id: str = EXEC_MAVEN_ARTIFACT
    version: str = DEFAULT_EXEC_MAVEN_VERSION
    goal: str = EXEC_GOAL


def to_configuration(resolved: ResolvedCommand) -> dict[str, Any]:
    """
    Build the plugin configuration mapping for a resolved command.

    Keys are emitted in plugin order; ``workingDirectory`` only when set and
    ``successCodes`` only when custom codes are present.
    """
    configuration: dict[str, Any] = {
        EXECUTABLE_ELEMENT: resolved.shell_executable,
        ARGUMENTS_ELEMENT: list(resolved.final_arguments),
    }
    if resolved.working_directory is not None:
        configuration[WORKING_DIRECTORY_ELEMENT] = resolved.working_directory
    if resolved.success_codes:
        configuration[EXEC_SUCCESS_CODES_ELEMENT] = list(resolved.success_codes)
    return configuration


def configuration_element(resolved: ResolvedCommand) -> ET.Element:
    """Build the ``<configuration>`` element for a resolved command."""
    configuration = ET.Element("configuration")
    ET.SubElement(configuration, EXECUTABLE_ELEMENT).text = resolved.shell_executable

    arguments = ET.SubElement(configuration, ARGUMENTS_ELEMENT)
    for argument in resolved.final_arguments:
        ET.SubElement(arguments, ARGUMENT_ELEMENT).text = argument

    if resolved.working_directory is not None:
        ET.SubElement(configuration, WORKING_DIRECTORY_ELEMENT).text = resolved.working_directory

    if resolved.success_codes:
        codes = ET.SubElement(configuration, EXEC_SUCCESS_CODES_ELEMENT)
        for code in resolved.success_codes:
            ET.SubElement(codes, EXEC_SUCCESS_CODE_ELEMENT).text = str(code)

    return configuration


def render_plugin_xml(
    resolved: ResolvedCommand, coordinates: PluginCoordinates | None = None
) -> str:
    """
    Render a ``<plugin>`` block that runs the resolved command.

    Args:
        resolved: Command to execute
        coordinates: Plugin coordinates (defaults to exec-maven-plugin 1.2.1)

    Returns:
        Indented XML string suitable for a pom.xml ``<plugins>`` section
    """
    coordinates = coordinates or PluginCoordinates()

    plugin = ET.Element("plugin")
    ET.SubElement(plugin, "groupId").text = coordinates.group_id
    ET.SubElement(plugin, "artifactId").text = coordinates.artifact_id
    ET.SubElement(plugin, "version").text = coordinates.version

    execution = ET.SubElement(ET.SubElement(plugin, "executions"), "execution")
    goals = ET.SubElement(execution, "goals")
    ET.SubElement(goals, "goal").text = coordinates.goal
    execution.append(configuration_element(resolved))

    ET.indent(plugin, space="    ")
    return ET.tostring(plugin, encoding="unicode")


__all__ = [
    "PluginCoordinates",
    "to_configuration",
    "configuration_element",
    "render_plugin_xml",
    "EXEC_MAVEN_GROUP",
    "EXEC_MAVEN_ARTIFACT",
    "EXEC_GOAL",
    "DEFAULT_EXEC_MAVEN_VERSION",
]
