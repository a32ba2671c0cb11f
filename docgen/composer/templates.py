"""
Document Templates and Rendering Stylesheet.

Jinja2 templates for the three document types, the standalone page
wrapper used for capture and printing, and the stylesheet that gives the
class names used by fragments (background motifs, hexagon clip shape,
table layout) their look.
"""

from jinja2 import DictLoader, Environment, StrictUndefined

STYLESHEET = """
body { margin: 0; background: #ffffff; font-family: "Inter", "Helvetica Neue", Arial, sans-serif; color: #1f2937; }
.document-surface { position: relative; box-sizing: border-box; width: 794px; padding: 48px; background: #ffffff;
  border: 1px solid #e5e7eb; border-radius: 8px; box-shadow: 0 10px 25px rgba(0, 0, 0, 0.08); overflow: hidden; }
.document-content { position: relative; z-index: 10; }
.doc-title h1 { font-size: 30px; font-weight: 700; margin: 0 0 8px; color: #1f2937; }
.doc-title-centered { text-align: center; margin-bottom: 32px; }
.doc-title-split { display: flex; justify-content: space-between; align-items: flex-start; margin-bottom: 32px; }
.company { font-size: 14px; color: #4b5563; }
.company p { margin: 0; }
.company-name { font-weight: 500; }
.doc-meta { display: grid; grid-template-columns: 1fr 1fr; gap: 32px; margin-bottom: 32px; }
.doc-meta-right { text-align: right; font-size: 14px; color: #4b5563; }
.doc-meta-right p { margin: 0; }
.doc-meta-right span { font-weight: 500; }
.doc-party h3 { font-weight: 600; margin: 0 0 8px; }
.doc-party p { margin: 0; }
.doc-address { font-size: 14px; color: #4b5563; white-space: pre-line; }
.doc-items { width: 100%; border-collapse: collapse; margin-bottom: 32px; }
.doc-items th { padding: 8px 0; border-bottom: 2px solid #1f2937; }
.doc-items td { padding: 8px 0; border-bottom: 1px solid #e5e7eb; }
.doc-items .left { text-align: left; }
.doc-items .center { text-align: center; }
.doc-items .right { text-align: right; }
.doc-items .amount { font-weight: 500; }
.doc-summary { display: flex; justify-content: flex-end; margin-bottom: 32px; }
.doc-summary-box { width: 256px; }
.doc-summary-row { display: flex; justify-content: space-between; padding: 4px 0; }
.doc-summary-row.discount { color: #dc2626; }
.doc-summary-row.total { border-top: 2px solid #1f2937; padding-top: 8px; font-weight: 700; font-size: 18px; }
.doc-notes { border-top: 1px solid #e5e7eb; padding-top: 16px; margin-bottom: 32px; font-size: 14px; color: #4b5563; }
.doc-notes h4 { font-weight: 600; color: #1f2937; margin: 0 0 8px; }
.memo-fields { margin-bottom: 32px; }
.memo-grid { display: grid; grid-template-columns: repeat(3, 1fr); gap: 16px; }
.memo-field { border-bottom: 1px solid #d1d5db; padding-bottom: 4px; margin-bottom: 8px; }
.memo-field span { font-size: 14px; font-weight: 600; color: #374151; }
.memo-field p { margin: 0; }
.memo-message { margin-bottom: 32px; line-height: 1.625; white-space: pre-line; }
.stamp-container { position: relative; z-index: 10; float: right; margin: -48px 0 16px 16px; }
.clear-both { clear: both; }
.doc-footer { text-align: center; margin-top: 32px; font-size: 12px; color: #6b7280; }
.stamp-hexagon { clip-path: polygon(25% 5%, 75% 5%, 100% 50%, 75% 95%, 25% 95%, 0% 50%); }
.bg-minimalist { background: #ffffff; border-top: 6px solid #e5e7eb; }
.bg-professional { background: linear-gradient(180deg, #f1f5f9 0%, #ffffff 35%); border-left: 8px solid #1e3a8a; }
.bg-modern { background: linear-gradient(135deg, #eef2ff 0%, #ffffff 45%, #ecfeff 100%); }
.bg-classic { background: #fdf8ee; border: 6px double #b59f6b; }
.bg-geometric { background-color: #ffffff;
  background-image: repeating-linear-gradient(45deg, rgba(99, 102, 241, 0.06) 0 12px, transparent 12px 24px); }
.bg-watermark::before { content: "GeneratorDok"; position: absolute; top: 45%; left: 50%; z-index: 0;
  transform: translate(-50%, -50%) rotate(-30deg); font-size: 96px; font-weight: 800; color: rgba(31, 41, 55, 0.05);
  white-space: nowrap; pointer-events: none; }
"""

PRINT_STYLESHEET = """
body { margin: 0; -webkit-print-color-adjust: exact; print-color-adjust: exact; }
.document-surface { border: none !important; box-shadow: none !important; border-radius: 0 !important;
  margin: 0 auto; padding: 0 !important; max-width: 100%; width: auto; }
@page { size: A4; margin: {{ margin_mm }}mm; }
"""

_TEMPLATES = {
    "base.html": """\
<div class="document-surface document-{{ document_type }}{% if background %} {{ background.css_class }}{% endif %}" id="{{ surface_id }}" data-document="{{ document_type }}"{% if background %} data-background="{{ background.value }}"{% endif %}>
<div class="document-content">
{% block content %}{% endblock %}
{% if stamp %}
<div class="stamp-container">{{ stamp }}</div>
{% endif %}
<div class="clear-both"></div>
<footer class="doc-footer"><p>{% block footer %}{{ labels.thank_you }}{% endblock %}</p></footer>
</div>
</div>
""",
    "macros.html": """\
{% macro company_block(company, with_email=true) %}
<div class="company">
<p class="company-name">{{ company.name }}</p>
<p>{{ company.tagline }}</p>
{% if with_email %}<p>{{ company.email }}</p>{% endif %}
</div>
{% endmacro %}
{% macro items_table(rows, price_label, amount_label) %}
<table class="doc-items">
<thead><tr><th class="left">Deskripsi</th><th class="center">Qty</th><th class="right">{{ price_label }}</th><th class="right">{{ amount_label }}</th></tr></thead>
<tbody>
{% for row in rows %}
<tr><td class="left">{{ row.description }}</td><td class="center">{{ row.quantity }}</td><td class="right">{{ row.unit_price }}</td><td class="right amount">{{ row.line_total }}</td></tr>
{% endfor %}
</tbody>
</table>
{% endmacro %}
""",
    "receipt.html": """\
{% extends "base.html" %}
{% from "macros.html" import company_block, items_table %}
{% block content %}
<header class="doc-title doc-title-centered">
<h1>{{ title }}</h1>
{{ company_block(company) }}
</header>
<section class="doc-meta">
<div class="doc-party">
<h3>Informasi Pelanggan</h3>
<p>{{ data.customer_name }}</p>
{% if data.customer_address %}<p class="doc-address">{{ data.customer_address }}</p>{% endif %}
</div>
<div class="doc-meta-right">
<p>No. Kwitansi: <span>{{ data.number }}</span></p>
<p>Tanggal: <span>{{ date }}</span></p>
</div>
</section>
{{ items_table(rows, "Harga", "Total") }}
<div class="doc-summary"><div class="doc-summary-box">
<div class="doc-summary-row total"><span>TOTAL:</span><span>{{ totals.total }}</span></div>
</div></div>
{% if data.notes %}
<div class="doc-notes"><p>{{ data.notes }}</p></div>
{% endif %}
{% endblock %}
""",
    "invoice.html": """\
{% extends "base.html" %}
{% from "macros.html" import company_block, items_table %}
{% block content %}
<header class="doc-title doc-title-split">
<div>
<h1>{{ title }}</h1>
{{ company_block(company) }}
</div>
<div class="doc-meta-right">
<p>No. Faktur: <span>{{ data.number }}</span></p>
<p>Tanggal: <span>{{ date }}</span></p>
<p>Jatuh Tempo: <span>{{ due_date }}</span></p>
<p>Syarat: <span>{{ data.payment_terms.display_name }}</span></p>
</div>
</header>
<section class="doc-party">
<h3>Ditagih Kepada:</h3>
<p>{{ data.bill_to_name }}</p>
{% if data.bill_to_address %}<p class="doc-address">{{ data.bill_to_address }}</p>{% endif %}
</section>
{{ items_table(rows, "Tarif", "Jumlah") }}
<div class="doc-summary"><div class="doc-summary-box">
<div class="doc-summary-row"><span>Subtotal:</span><span>{{ totals.subtotal }}</span></div>
{% if totals.show_discount %}
<div class="doc-summary-row discount"><span>Diskon ({{ totals.discount_rate }}%):</span><span>-{{ totals.discount_amount }}</span></div>
{% endif %}
{% if totals.show_tax %}
<div class="doc-summary-row tax"><span>Pajak ({{ totals.tax_rate }}%):</span><span>{{ totals.tax_amount }}</span></div>
{% endif %}
<div class="doc-summary-row total"><span>TOTAL:</span><span>{{ totals.grand_total }}</span></div>
</div></div>
{% if data.notes %}
<div class="doc-notes"><h4>Catatan:</h4><p>{{ data.notes }}</p></div>
{% endif %}
{% endblock %}
""",
    "note.html": """\
{% extends "base.html" %}
{% from "macros.html" import company_block %}
{% block content %}
<header class="doc-title doc-title-centered">
<h1>{{ title }}</h1>
{{ company_block(company, with_email=false) }}
</header>
<section class="memo-fields">
<div class="memo-grid">
<div class="memo-field"><span>KEPADA:</span><p>{{ data.to }}</p></div>
<div class="memo-field"><span>DARI:</span><p>{{ data.sender or company.name }}</p></div>
<div class="memo-field"><span>TANGGAL:</span><p>{{ date }}</p></div>
</div>
<div class="memo-field"><span>SUBJEK:</span><p>{{ data.subject }}</p></div>
<div class="memo-field"><span>NO. NOTA:</span><p>{{ data.number }}</p></div>
</section>
{% if data.message %}
<div class="memo-message">{{ data.message }}</div>
{% endif %}
{% endblock %}
{% block footer %}{{ labels.electronic_note }}{% endblock %}
""",
    "page.html": """\
<!DOCTYPE html>
<html lang="id">
<head>
<meta charset="utf-8">
<title>{{ title }}</title>
<style>{{ stylesheet }}</style>
{% if print_stylesheet %}<style>{{ print_stylesheet }}</style>{% endif %}
</head>
<body>
{{ fragment }}
{% if auto_print %}<script>window.onload = function () { window.focus(); window.print(); };</script>{% endif %}
</body>
</html>
""",
}

environment = Environment(
    loader=DictLoader(_TEMPLATES),
    autoescape=True,
    undefined=StrictUndefined,
    trim_blocks=True,
    lstrip_blocks=True,
)

# The print stylesheet is plain text with one placeholder, never autoescaped
_print_environment = Environment(undefined=StrictUndefined)


def render_print_stylesheet(margin_mm: float) -> str:
    return _print_environment.from_string(PRINT_STYLESHEET).render(margin_mm=margin_mm)
