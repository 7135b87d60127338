from .node import REDACTED, BlueBubblesException, Node, redact
