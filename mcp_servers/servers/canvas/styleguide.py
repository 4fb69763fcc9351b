"""
Course styleguide page.

The styleguide is an ordinary wiki page (slug "canvas-styleguide") that the
page tools hand to the LLM as a formatting reference.
"""

from datetime import date
from html import escape
from typing import Optional

_EXAMPLES = """
  <h2>Canvas-Specific Components</h2>
  <h3>Alert Boxes</h3>
  <div class="alert alert-info">
    <strong>Info Alert:</strong> Use for general information and tips
    <br><code>&lt;div class="alert alert-info"&gt;...&lt;/div&gt;</code>
  </div>
  <div class="alert alert-warning">
    <strong>Warning Alert:</strong> Use for important notices and deadlines
    <br><code>&lt;div class="alert alert-warning"&gt;...&lt;/div&gt;</code>
  </div>
  <div class="alert alert-danger">
    <strong>Danger Alert:</strong> Use for critical information and errors
    <br><code>&lt;div class="alert alert-danger"&gt;...&lt;/div&gt;</code>
  </div>

  <h3>Content Boxes</h3>
  <div style="border: 1px solid #ddd; padding: 15px; margin: 10px 0; background: #f8f9fa;">
    <strong>Content Box Example:</strong> Use for highlighting important content
  </div>

  <h2>Tables</h2>
  <table style="width: 100%; border-collapse: collapse; margin: 15px 0;">
    <thead>
      <tr style="background-color: #f8f9fa;">
        <th style="border: 1px solid #ddd; padding: 8px; text-align: left;">Header 1</th>
        <th style="border: 1px solid #ddd; padding: 8px; text-align: left;">Header 2</th>
      </tr>
    </thead>
    <tbody>
      <tr>
        <td style="border: 1px solid #ddd; padding: 8px;">Data 1</td>
        <td style="border: 1px solid #ddd; padding: 8px;">Data 2</td>
      </tr>
    </tbody>
  </table>
"""

_STANDARDS = """
  <h2>Page Structure Standards</h2>
  <ul>
    <li><strong>H1:</strong> Main page title only (one per page)</li>
    <li><strong>H2:</strong> Major sections</li>
    <li><strong>H3:</strong> Subsections</li>
    <li><strong>H4-H6:</strong> Sparingly, for deep hierarchy</li>
  </ul>

  <h2>Typography Standards</h2>
  <ul>
    <li><strong>Bold</strong> (&lt;strong&gt;) for important terms</li>
    <li><em>Italic</em> (&lt;em&gt;) for emphasis</li>
    <li><code>Code</code> (&lt;code&gt;) for technical content</li>
    <li>Unordered lists for general items, ordered lists for step-by-step instructions</li>
  </ul>

  <h2>Link Standards</h2>
  <ul>
    <li>External links open in a new tab (target="_blank")</li>
    <li>Internal links open in the same tab</li>
    <li>Use descriptive link text, never "click here"</li>
  </ul>

  <h2>Accessibility Standards</h2>
  <ul>
    <li><strong>Alt text:</strong> every image has a descriptive alt attribute</li>
    <li><strong>Color contrast:</strong> text has sufficient contrast</li>
    <li><strong>Heading hierarchy:</strong> headings follow H1-H6 order</li>
    <li><strong>Responsive:</strong> no fixed widths; use percentages</li>
  </ul>
"""


def generate_styleguide(
    include_examples: bool = True,
    custom_branding: Optional[str] = None,
    today: Optional[date] = None,
) -> str:
    """Build the styleguide page body (HTML)."""
    today = today or date.today()
    parts = [
        '<div class="canvas-styleguide">',
        "  <h1>Canvas Course Styleguide</h1>",
        "  <p><em>Consistent design standards for all course pages</em></p>",
    ]
    if custom_branding:
        parts.append(
            f'  <div class="alert alert-info"><strong>Custom Branding:</strong> {escape(custom_branding)}</div>'
        )
    parts.append(_STANDARDS.rstrip())
    if include_examples:
        parts.append(_EXAMPLES.rstrip())
    parts.append(
        f"  <hr>\n  <p><small><em>Last updated: {today.isoformat()}</em></small></p>"
    )
    parts.append("</div>")
    return "\n".join(parts)
