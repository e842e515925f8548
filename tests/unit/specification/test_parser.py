"""Tests for podspec parsing."""

from collections.abc import Callable
from pathlib import Path

import pytest

from podrepo.exceptions import SpecParseError
from podrepo.specification import (
    Specification,
    parse_json_podspec,
    parse_ruby_podspec,
    parse_spec_file,
)

# =============================================================================
# JSON Podspecs
# =============================================================================


class TestParseJsonPodspec:
    def test_returns_object_as_dict(self) -> None:
        data = parse_json_podspec('{"name": "Foo", "version": "1.0"}')
        assert data == {"name": "Foo", "version": "1.0"}

    def test_raises_on_invalid_json(self) -> None:
        with pytest.raises(SpecParseError, match="Invalid JSON podspec"):
            _ = parse_json_podspec("{not json")

    def test_raises_when_not_an_object(self) -> None:
        with pytest.raises(SpecParseError, match="expected an object"):
            _ = parse_json_podspec('["Foo"]')


# =============================================================================
# Ruby Podspecs
# =============================================================================


class TestParseRubyPodspec:
    def test_extracts_literal_assignments(self) -> None:
        content = """
Pod::Spec.new do |s|
  s.name     = 'Foo'
  s.version  = '1.2.3'
  s.summary  = "Foo does things."
  s.requires_arc = true
end
"""
        data = parse_ruby_podspec(content)
        assert data["name"] == "Foo"
        assert data["version"] == "1.2.3"
        assert data["summary"] == "Foo does things."
        assert data["requires_arc"] is True

    def test_accepts_any_block_variable(self) -> None:
        content = """Pod::Specification.new do |spec|
  spec.name = 'Bar'
  spec.version = '2.0'
end
"""
        data = parse_ruby_podspec(content)
        assert data["name"] == "Bar"
        assert data["version"] == "2.0"

    def test_raises_without_spec_block(self) -> None:
        with pytest.raises(SpecParseError, match="Pod::Spec.new"):
            _ = parse_ruby_podspec("puts 'hello'\n")

    def test_parses_hashes_with_symbol_keys(self) -> None:
        content = """Pod::Spec.new do |s|
  s.name = 'Foo'
  s.version = '1.0'
  s.license = { :type => 'MIT', :file => 'LICENSE' }
end
"""
        data = parse_ruby_podspec(content)
        assert data["license"] == {"type": "MIT", "file": "LICENSE"}

    def test_parses_new_style_hash_keys(self) -> None:
        content = """Pod::Spec.new do |s|
  s.name = 'Foo'
  s.version = '1.0'
  s.source = { git: 'https://example.com/Foo.git', tag: s.version.to_s }
end
"""
        data = parse_ruby_podspec(content)
        assert data["source"] == {"git": "https://example.com/Foo.git", "tag": "1.0"}

    def test_parses_multiline_hashes(self) -> None:
        content = """Pod::Spec.new do |s|
  s.name = 'Foo'
  s.version = '1.0'
  s.authors = {
    'Alice' => 'alice@example.com',
    'Bob' => 'bob@example.com'
  }
end
"""
        data = parse_ruby_podspec(content)
        assert data["authors"] == {
            "Alice": "alice@example.com",
            "Bob": "bob@example.com",
        }

    def test_parses_arrays(self) -> None:
        content = """Pod::Spec.new do |s|
  s.name = 'Foo'
  s.version = '1.0'
  s.frameworks = ['UIKit', 'Foundation']
end
"""
        data = parse_ruby_podspec(content)
        assert data["frameworks"] == ["UIKit", "Foundation"]

    def test_maps_singular_attributes_to_json_keys(self) -> None:
        content = """Pod::Spec.new do |s|
  s.name = 'Foo'
  s.version = '1.0'
  s.author = { 'Alice' => 'alice@example.com' }
  s.framework = 'UIKit'
end
"""
        data = parse_ruby_podspec(content)
        assert data["authors"] == {"Alice": "alice@example.com"}
        assert data["frameworks"] == "UIKit"
        assert "author" not in data

    def test_interpolates_name_and_version(self) -> None:
        content = """Pod::Spec.new do |s|
  s.version = '3.1'
  s.name = 'Foo'
  s.homepage = "https://example.com/#{s.name}/#{s.version}"
end
"""
        data = parse_ruby_podspec(content)
        assert data["homepage"] == "https://example.com/Foo/3.1"

    def test_skips_unresolvable_interpolation(self) -> None:
        content = """Pod::Spec.new do |s|
  s.name = 'Foo'
  s.version = '1.0'
  s.homepage = "https://example.com/#{ENV['HOST']}"
end
"""
        data = parse_ruby_podspec(content)
        assert "homepage" not in data

    def test_skips_computed_values(self) -> None:
        content = """Pod::Spec.new do |s|
  s.name = 'Foo'
  s.version = File.read('VERSION').strip
  s.summary = 'Foo.'
end
"""
        data = parse_ruby_podspec(content)
        assert "version" not in data
        assert data["summary"] == "Foo."

    def test_reads_dedented_heredocs(self) -> None:
        content = """Pod::Spec.new do |s|
  s.name = 'Foo'
  s.version = '1.0'
  s.description = <<-DESC
    First line.
      Indented line.
  DESC
  s.summary = 'After the heredoc.'
end
"""
        data = parse_ruby_podspec(content)
        assert data["description"] == "First line.\n  Indented line."
        assert data["summary"] == "After the heredoc."

    def test_collects_dependencies(self) -> None:
        content = """Pod::Spec.new do |s|
  s.name = 'Foo'
  s.version = '1.0'
  s.dependency 'Bar', '~> 2.0'
  s.dependency 'Baz'
end
"""
        data = parse_ruby_podspec(content)
        assert data["dependencies"] == {"Bar": ["~> 2.0"], "Baz": []}

    def test_collects_platforms(self) -> None:
        content = """Pod::Spec.new do |s|
  s.name = 'Foo'
  s.version = '1.0'
  s.platform = :ios, '12.0'
  s.osx.deployment_target = '10.15'
end
"""
        data = parse_ruby_podspec(content)
        assert data["platforms"] == {"ios": "12.0", "osx": "10.15"}

    def test_records_subspec_names(self) -> None:
        content = """Pod::Spec.new do |s|
  s.name = 'Foo'
  s.version = '1.0'
  s.subspec 'Core' do |core|
    core.source_files = 'Core/*.swift'
  end
end
"""
        data = parse_ruby_podspec(content)
        assert data["subspecs"] == [{"name": "Core"}]
        assert "source_files" not in data

    def test_ignores_comment_lines(self) -> None:
        content = """Pod::Spec.new do |s|
  s.name = 'Foo'
  # s.version = '0.1'
  s.version = '1.0'
end
"""
        data = parse_ruby_podspec(content)
        assert data["version"] == "1.0"

    def test_strips_trailing_comments(self) -> None:
        content = """Pod::Spec.new do |s|
  s.name = 'Foo' # pod name
  s.version = '1.0' # bumped by release script
  s.requires_arc = true  # always
end
"""
        data = parse_ruby_podspec(content)
        assert data["name"] == "Foo"
        assert data["version"] == "1.0"
        assert data["requires_arc"] is True

    def test_keeps_hash_characters_inside_strings(self) -> None:
        content = """Pod::Spec.new do |s|
  s.name = 'Foo'
  s.version = '1.0'
  s.summary = 'Issue #12 fixed' # note
  s.source = { :git => 'https://example.com/Foo.git', :tag => "v#{s.version}" }
end
"""
        data = parse_ruby_podspec(content)
        assert data["summary"] == "Issue #12 fixed"
        assert data["source"]["tag"] == "v1.0"

    def test_strips_comments_inside_multiline_hashes(self) -> None:
        content = """Pod::Spec.new do |s|
  s.name = 'Foo'
  s.version = '1.0'
  s.source = { # where the code lives
    :git => 'https://example.com/Foo.git', # mirror
    :tag => '1.0'
  }
end
"""
        data = parse_ruby_podspec(content)
        assert data["source"] == {"git": "https://example.com/Foo.git", "tag": "1.0"}

    def test_strips_freeze_suffix(self) -> None:
        content = """Pod::Spec.new do |s|
  s.name = 'Foo'.freeze
  s.version = '1.0'
end
"""
        assert parse_ruby_podspec(content)["name"] == "Foo"


# =============================================================================
# parse_spec_file
# =============================================================================


class TestParseSpecFile:
    def test_parses_json_file(
        self, tmp_path: Path, make_json_podspec: Callable[..., Path]
    ) -> None:
        path = make_json_podspec(tmp_path, "Foo", "1.0.0")
        name, version, attributes = parse_spec_file(path)
        assert (name, version) == ("Foo", "1.0.0")
        assert attributes["license"] == "MIT"

    def test_parses_ruby_file(
        self, tmp_path: Path, make_ruby_podspec: Callable[..., Path]
    ) -> None:
        path = make_ruby_podspec(tmp_path, "Foo", "2.0.0")
        name, version, attributes = parse_spec_file(path)
        assert (name, version) == ("Foo", "2.0.0")
        assert attributes["source"]["tag"] == "2.0.0"
        assert attributes["license"] == {"type": "MIT"}

    def test_specification_reads_version_with_trailing_comment(
        self, tmp_path: Path
    ) -> None:
        path = tmp_path / "Foo.podspec"
        _ = path.write_text("""Pod::Spec.new do |s|
  s.name    = 'Foo'
  s.version = '1.0.0' # bumped by release script
end
""")

        spec = Specification.from_file(path)

        assert spec.version == "1.0.0"
        assert spec.attributes["version"] == "1.0.0"

    def test_converts_numeric_json_version_to_string(self, tmp_path: Path) -> None:
        path = tmp_path / "Foo.podspec.json"
        _ = path.write_text('{"name": "Foo", "version": 2}')
        _, version, _ = parse_spec_file(path)
        assert version == "2"

    def test_raises_without_name(self, tmp_path: Path) -> None:
        path = tmp_path / "Foo.podspec.json"
        _ = path.write_text('{"version": "1.0"}')
        with pytest.raises(SpecParseError, match="does not declare a name") as exc:
            _ = parse_spec_file(path)
        assert exc.value.path == path

    def test_raises_without_version(self, tmp_path: Path) -> None:
        path = tmp_path / "Foo.podspec.json"
        _ = path.write_text('{"name": "Foo"}')
        with pytest.raises(SpecParseError, match="does not declare a version"):
            _ = parse_spec_file(path)

    def test_raises_when_file_missing(self, tmp_path: Path) -> None:
        with pytest.raises(SpecParseError, match="Unable to read podspec"):
            _ = parse_spec_file(tmp_path / "Missing.podspec")
