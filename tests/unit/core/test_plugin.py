"""Unit tests for exec-maven-plugin configuration rendering."""

import xml.etree.ElementTree as ET

from execbridge.core.command import ResolvedCommand
from execbridge.core.os_family import OSFamily
from execbridge.core.plugin import (
    PluginCoordinates,
    configuration_element,
    render_plugin_xml,
    to_configuration,
)


def _windows_command(**overrides) -> ResolvedCommand:
    values = {
        "shell_executable": "cmd",
        "final_arguments": ("/C", "grunt", "build"),
        "working_directory": "C:\\webapp",
        "os_family": OSFamily.WINDOWS,
    }
    values.update(overrides)
    return ResolvedCommand(**values)


class TestToConfiguration:
    """Tests for to_configuration()."""

    def test_fields_in_plugin_order(self):
        """Keys follow executable, arguments, workingDirectory."""
        configuration = to_configuration(_windows_command())

        assert list(configuration) == ["executable", "arguments", "workingDirectory"]
        assert configuration["executable"] == "cmd"
        assert configuration["arguments"] == ["/C", "grunt", "build"]
        assert configuration["workingDirectory"] == "C:\\webapp"

    def test_success_codes_appended_when_present(self):
        """Custom codes are the trailing successCodes entry."""
        configuration = to_configuration(_windows_command(success_codes=(0, 1, 2)))

        assert list(configuration)[-1] == "successCodes"
        assert configuration["successCodes"] == [0, 1, 2]

    def test_no_success_codes_field_by_default(self):
        """Without custom codes there is no successCodes entry."""
        assert "successCodes" not in to_configuration(_windows_command())

    def test_working_directory_omitted_when_unset(self):
        """No working directory means no workingDirectory entry."""
        configuration = to_configuration(_windows_command(working_directory=None))

        assert "workingDirectory" not in configuration


class TestConfigurationElement:
    """Tests for configuration_element()."""

    def test_nested_argument_elements(self):
        """Each argument is its own <argument> element."""
        element = configuration_element(_windows_command())

        arguments = [arg.text for arg in element.find("arguments").findall("argument")]
        assert arguments == ["/C", "grunt", "build"]
        assert element.findtext("executable") == "cmd"
        assert element.findtext("workingDirectory") == "C:\\webapp"

    def test_success_code_elements(self):
        """Success codes render as <successCodes><successCode>."""
        element = configuration_element(_windows_command(success_codes=(0, 3)))

        codes = [code.text for code in element.find("successCodes").findall("successCode")]
        assert codes == ["0", "3"]

    def test_no_success_codes_element_by_default(self):
        """The successCodes element is omitted without custom codes."""
        assert configuration_element(_windows_command()).find("successCodes") is None


class TestRenderPluginXml:
    """Tests for render_plugin_xml()."""

    def test_default_coordinates(self):
        """The plugin defaults to exec-maven-plugin 1.2.1, goal exec."""
        plugin = ET.fromstring(render_plugin_xml(_windows_command()))

        assert plugin.tag == "plugin"
        assert plugin.findtext("groupId") == "org.codehaus.mojo"
        assert plugin.findtext("artifactId") == "exec-maven-plugin"
        assert plugin.findtext("version") == "1.2.1"
        assert plugin.findtext("executions/execution/goals/goal") == "exec"
        assert plugin.findtext("executions/execution/configuration/executable") == "cmd"

    def test_custom_version(self):
        """The plugin version can be overridden."""
        xml = render_plugin_xml(_windows_command(), PluginCoordinates(version="3.1.0"))

        assert ET.fromstring(xml).findtext("version") == "3.1.0"

    def test_arguments_are_escaped(self):
        """Arguments with XML metacharacters survive a round trip."""
        resolved = ResolvedCommand(shell_executable="node", final_arguments=("--title=a<b&c",))

        plugin = ET.fromstring(render_plugin_xml(resolved))

        assert plugin.findtext("executions/execution/configuration/arguments/argument") == "--title=a<b&c"
