from flask import Flask, jsonify, request
from markupsafe import Markup
from string import Template
import html

from littlesearch.analysis import Analyzer
from littlesearch.index import IndexBuilder
from littlesearch.search import Searcher

from .sample_docs import NOISE_WORDS, SAMPLE_DOCS

HTML_TEMPLATE = Template("""
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <title>Little Search Engine</title>
  <style>
    body { font-family: system-ui, -apple-system, Segoe UI, Roboto, Arial; margin: 24px; }
    .box { max-width: 900px; margin: 0 auto; }
    input[type=text] { width: 40%; padding: 12px 14px; font-size: 16px; border: 1px solid #ccc; border-radius: 10px; }
    .hit { border: 1px solid #eee; border-radius: 12px; padding: 12px 14px; margin: 12px 0; box-shadow: 0 1px 2px rgba(0,0,0,.04); }
    .hit h3 { margin: 0 0 6px; font-size: 18px; }
    .hit small { color: #666; }
    .pill { display: inline-block; padding: 2px 8px; border-radius: 999px; background: #f1f5f9; color: #0f172a; font-size: 12px; margin-right: 4px; }
  </style>
</head>
<body>
  <div class="box">
    <h1>Little Search Engine</h1>
    <form method="get" action="/">
      <input autofocus name="kw1" type="text" placeholder="First keyword, e.g. rabbit" value="$kw1">
      OR
      <input name="kw2" type="text" placeholder="Second keyword, e.g. alice" value="$kw2">
      <button type="submit">Search</button>
    </form>
    <p><small>Up to 5 documents, by how often either keyword occurs. Ties go to the first keyword.</small></p>
    <hr/>
    $results
  </div>
</body>
</html>
""")


def build_searcher(unique: bool = False) -> Searcher:
    builder = IndexBuilder(Analyzer(NOISE_WORDS))
    for name, text in SAMPLE_DOCS.items():
        builder.add_document(name, text.split())
    return Searcher(builder.build(), unique=unique)


def _render_results(sr: Searcher, kw1: str, kw2: str) -> str:
    if not kw1 and not kw2:
        return "<p><i>Enter two keywords…</i></p>"
    hits = sr.search(kw1, kw2)
    if hits is None:
        return f"<p>No matching documents for <b>{html.escape(kw1)}</b> or <b>{html.escape(kw2)}</b></p>"
    out = [f"<p><b>{len(hits)}</b> results:</p>"]
    for rank, name in enumerate(hits, 1):
        freqs = []
        for kw in (kw1, kw2):
            for occ in sr.occurrences(kw) or ():
                if occ.document == name:
                    freqs.append(f"<span class='pill'>{html.escape(kw.lower())}: {occ.frequency}</span>")
        snippet = SAMPLE_DOCS[name][:160] + ('…' if len(SAMPLE_DOCS[name]) > 160 else '')
        out.append(f"""
        <div class="hit">
          <h3>{rank}. {html.escape(name)}</h3>
          <div style="margin-top:6px">{html.escape(snippet)}</div>
          <div style="margin-top:8px">{''.join(freqs)}</div>
        </div>
        """)
    return "\n".join(out)


def create_app(unique: bool = False):
    sr = build_searcher(unique=unique)
    app = Flask(__name__)

    @app.get("/")
    def home():
        kw1 = request.args.get("kw1", "").strip()
        kw2 = request.args.get("kw2", "").strip()
        res = _render_results(sr, kw1, kw2)
        return HTML_TEMPLATE.substitute(kw1=html.escape(kw1), kw2=html.escape(kw2), results=Markup(res))

    @app.get("/api/search")
    def api_search():
        kw1 = request.args.get("kw1", "").strip()
        kw2 = request.args.get("kw2", "").strip()
        return jsonify({"kw1": kw1, "kw2": kw2, "results": sr.search(kw1, kw2)})

    return app


def main():
    app = create_app()
    app.run(host="127.0.0.1", port=8000, debug=False)


if __name__ == "__main__":
    main()
