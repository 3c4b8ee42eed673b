"""tsdiagram - TypeScript declarations to class diagram model.

tsdiagram turns a type-checked TypeScript declaration graph into an abstract
class diagram model: classes, interfaces, enums and object-shaped type
aliases with their members, inheritance edges and inferred associations.
A renderer consumes the model; layout and drawing are not done here.

Core principles:
- Best-effort: every declaration is translated independently, problems
  become diagnostics instead of aborting the run
- Stable identities: entities are keyed by fully-qualified symbol paths
- Frontend agnostic: any parser that fills the declaration model can drive
  the translator
"""

__version__ = "0.1.0"
__author__ = "tsdiagram Contributors"
