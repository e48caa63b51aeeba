"""
Bounded contexts of cvtex.

- Intake Context: raw CV text ingestion and heuristic parsing
- Templating Context: LaTeX template registry and document generation
"""
