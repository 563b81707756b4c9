"""Synthesize a click-counter component adapted to project conventions.

Used by ``wally add --inline`` when no pre-authored template should be
used. The output is a pure function of the component name and the
detected ProjectConfig; nothing is read from disk.
"""

from __future__ import annotations

from wally.models.component import ComponentFile
from wally.models.config import ProjectConfig
from wally.scaffold.names import class_name, pascal_case, selector


def _behavior(name: str, config: ProjectConfig) -> str:
    core_imports = "Component, signal" if config.use_signals else "Component"
    lines = [f"import {{ {core_imports} }} from '@angular/core';"]
    if config.use_standalone:
        lines.append("import { CommonModule } from '@angular/common';")
    lines += [
        "",
        "@Component({",
        f"  selector: '{selector(name)}',",
    ]
    if config.use_standalone:
        lines += [
            "  standalone: true,",
            "  imports: [CommonModule],",
        ]
    lines += [
        f"  templateUrl: './{name}.component.html',",
        f"  styleUrls: ['./{name}.component.css']",
        "})",
        f"export class {class_name(name)} {{",
    ]

    title = f"{pascal_case(name)} Component"
    if config.use_signals:
        lines += [
            f"  title = signal('{title}');",
            "  clickCount = signal(0);",
            "",
            "  onClick() {",
            "    this.clickCount.update(count => count + 1);",
            "    console.log(`${this.title()} clicked ${this.clickCount()} times`);",
            "  }",
        ]
    else:
        lines += [
            f"  title = '{title}';",
            "  clickCount = 0;",
            "",
            "  onClick() {",
            "    this.clickCount++;",
            "    console.log(`${this.title} clicked ${this.clickCount} times`);",
            "  }",
        ]
    lines += ["}", ""]
    return "\n".join(lines)


def _markup(name: str, config: ProjectConfig) -> str:
    # Signals are read through a call in template bindings.
    call = "()" if config.use_signals else ""
    title_binding = f"{{{{ title{call} }}}}"
    count_binding = f"{{{{ clickCount{call} }}}}"

    if config.use_tailwind:
        return (
            '<div class="max-w-md mx-auto bg-white rounded-xl shadow-md p-6">\n'
            '  <h2 class="text-2xl font-bold text-gray-900 mb-4 text-center">\n'
            f"    {title_binding}\n"
            "  </h2>\n"
            "\n"
            "  <button\n"
            '    (click)="onClick()"\n'
            '    class="w-full bg-blue-600 hover:bg-blue-700 text-white font-semibold '
            'py-3 px-6 rounded-lg transition-colors">\n'
            "    Click me!\n"
            "  </button>\n"
            "\n"
            '  <div class="mt-4 text-center">\n'
            '    <span class="text-lg font-semibold text-blue-600">\n'
            f"      Clicks: {count_binding}\n"
            "    </span>\n"
            "  </div>\n"
            "</div>\n"
        )

    return (
        f'<div class="{name}-container">\n'
        f'  <h2 class="{name}-title">\n'
        f"    {title_binding}\n"
        "  </h2>\n"
        "\n"
        f'  <button class="{name}-button" (click)="onClick()">\n'
        "    Click me!\n"
        "  </button>\n"
        "\n"
        f'  <div class="{name}-counter">\n'
        f"    Clicks: {count_binding}\n"
        "  </div>\n"
        "</div>\n"
    )


def _styles(name: str, config: ProjectConfig) -> str:
    if config.use_tailwind:
        return (
            f"/* Custom styles for {name} */\n"
            "/* Tailwind provides most styling through utility classes */\n"
            "\n"
            "@media (max-width: 640px) {\n"
            f"  .{name}-container {{\n"
            "    margin: 1rem;\n"
            "  }\n"
            "}\n"
        )

    return f""".{name}-container {{
  max-width: 400px;
  margin: 2rem auto;
  background: white;
  border-radius: 8px;
  box-shadow: 0 2px 4px rgba(0, 0, 0, 0.1);
  padding: 1.5rem;
}}

.{name}-title {{
  font-size: 1.5rem;
  font-weight: bold;
  margin-bottom: 1rem;
  text-align: center;
  color: #1f2937;
}}

.{name}-button {{
  width: 100%;
  background: #3b82f6;
  color: white;
  border: none;
  padding: 0.75rem 1.5rem;
  border-radius: 0.5rem;
  font-weight: 600;
  cursor: pointer;
  transition: background-color 0.2s;
}}

.{name}-button:hover {{
  background: #2563eb;
}}

.{name}-counter {{
  margin-top: 1rem;
  text-align: center;
  font-size: 1.125rem;
  font-weight: 600;
  color: #3b82f6;
}}
"""


def synthesize(name: str, config: ProjectConfig) -> list[ComponentFile]:
    """Build the behavior, markup and style files for component ``name``.

    Total over every name and flag combination; validating the name is the
    caller's job.

    Args:
        name: Component name, interpolated into file names, the class name,
            the selector and CSS class names.
        config: Detected project conventions.

    Returns:
        Exactly three files: ``.component.ts``, ``.component.html``,
        ``.component.css``.
    """
    return [
        ComponentFile(
            name=f"{name}.component.ts",
            content=_behavior(name, config),
            description="Component class",
        ),
        ComponentFile(
            name=f"{name}.component.html",
            content=_markup(name, config),
            description="HTML template",
        ),
        ComponentFile(
            name=f"{name}.component.css",
            content=_styles(name, config),
            description="CSS styles",
        ),
    ]
