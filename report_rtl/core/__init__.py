"""Core RTL fixing components."""

from .classifier import TextSource, classify, find_text_binding
from .contracts import ElementKind
from .fixer import RTLTextFixer, fix_rtl_text
from .interceptor import BindingInterceptor, InterceptorRegistry, InterceptorState
from .walker import TreeWalker, WalkSummary

__all__ = [
    "BindingInterceptor",
    "ElementKind",
    "InterceptorRegistry",
    "InterceptorState",
    "RTLTextFixer",
    "TextSource",
    "TreeWalker",
    "WalkSummary",
    "classify",
    "find_text_binding",
    "fix_rtl_text",
]
