import enum

from colorama import Fore


class Language(str, enum.Enum):
    ASSEMBLY = "Assembly"
    C = "C"
    CLOJURE = "Clojure"
    CMAKE = "CMake"
    COFFEESCRIPT = "CoffeeScript"
    CPP = "C++"
    CSHARP = "C#"
    CSS = "CSS"
    D = "D"
    DART = "Dart"
    DOCKERFILE = "Dockerfile"
    ELISP = "EmacsLisp"
    ELIXIR = "Elixir"
    ELM = "Elm"
    ERLANG = "Erlang"
    FISH = "Fish"
    FORTH = "Forth"
    FORTRAN = "Fortran"
    FSHARP = "FSharp"
    GO = "Go"
    GROOVY = "Groovy"
    HASKELL = "Haskell"
    HTML = "HTML"
    IDRIS = "Idris"
    JAVA = "Java"
    JAVASCRIPT = "JavaScript"
    JULIA = "Julia"
    JUPYTER = "Jupyter-Notebooks"
    KOTLIN = "Kotlin"
    LISP = "Lisp"
    LUA = "Lua"
    MARKDOWN = "Markdown"
    NIM = "Nim"
    NIX = "Nix"
    OBJECTIVE_C = "Objective-C"
    OCAML = "OCaml"
    ORG = "Org"
    PERL = "Perl"
    PHP = "Php"
    PROLOG = "Prolog"
    PURESCRIPT = "PureScript"
    PYTHON = "Python"
    R = "R"
    RACKET = "Racket"
    RUBY = "Ruby"
    RUST = "Rust"
    SCALA = "Scala"
    SHELL = "Shell"
    SWIFT = "Swift"
    TCL = "Tcl"
    TEX = "Tex"
    TYPESCRIPT = "TypeScript"
    VUE = "Vue"
    XML = "XML"
    ZIG = "Zig"
    UNKNOWN = "Unknown"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "Language":
        """Case-insensitive lookup by display name or member name; Unknown when nothing matches."""
        wanted = name.strip().lower()
        for language in cls:
            if wanted in (language.value.lower(), language.name.lower()):
                return language
        return cls.UNKNOWN

    @property
    def colors(self) -> tuple[str, ...]:
        return LANGUAGE_COLORS[self]


LANGUAGE_COLORS: dict[Language, tuple[str, ...]] = {
    Language.ASSEMBLY: (Fore.CYAN,),
    Language.C: (Fore.CYAN, Fore.BLUE),
    Language.CLOJURE: (Fore.CYAN, Fore.GREEN),
    Language.CMAKE: (Fore.BLUE, Fore.GREEN, Fore.RED, Fore.BLACK),
    Language.COFFEESCRIPT: (Fore.RED,),
    Language.CPP: (Fore.CYAN, Fore.BLUE),
    Language.CSHARP: (Fore.BLUE, Fore.MAGENTA),
    Language.CSS: (Fore.BLUE, Fore.WHITE),
    Language.D: (Fore.RED,),
    Language.DART: (Fore.CYAN, Fore.BLUE),
    Language.DOCKERFILE: (Fore.CYAN, Fore.WHITE, Fore.CYAN),
    Language.ELISP: (Fore.MAGENTA, Fore.WHITE),
    Language.ELIXIR: (Fore.MAGENTA,),
    Language.ELM: (Fore.BLACK, Fore.GREEN, Fore.YELLOW, Fore.CYAN),
    Language.ERLANG: (Fore.RED,),
    Language.FISH: (Fore.RED, Fore.YELLOW),
    Language.FORTH: (Fore.RED,),
    Language.FORTRAN: (Fore.WHITE, Fore.GREEN, Fore.CYAN, Fore.YELLOW, Fore.RED),
    Language.FSHARP: (Fore.CYAN, Fore.CYAN),
    Language.GO: (Fore.WHITE,),
    Language.GROOVY: (Fore.CYAN, Fore.WHITE),
    Language.HASKELL: (Fore.CYAN, Fore.MAGENTA, Fore.BLUE),
    Language.HTML: (Fore.RED, Fore.WHITE),
    Language.IDRIS: (Fore.RED,),
    Language.JAVA: (Fore.CYAN, Fore.RED),
    Language.JAVASCRIPT: (Fore.YELLOW,),
    Language.JULIA: (Fore.WHITE, Fore.BLUE, Fore.GREEN, Fore.RED, Fore.MAGENTA),
    Language.JUPYTER: (Fore.WHITE, Fore.YELLOW, Fore.WHITE),
    Language.KOTLIN: (Fore.BLUE, Fore.YELLOW, Fore.MAGENTA),
    Language.LISP: (Fore.YELLOW,),
    Language.LUA: (Fore.BLUE,),
    Language.MARKDOWN: (Fore.WHITE, Fore.RED),
    Language.NIM: (Fore.YELLOW, Fore.WHITE),
    Language.NIX: (Fore.CYAN, Fore.BLUE),
    Language.OBJECTIVE_C: (Fore.CYAN, Fore.BLUE),
    Language.OCAML: (Fore.YELLOW,),
    Language.ORG: (Fore.GREEN, Fore.RED, Fore.WHITE),
    Language.PERL: (Fore.CYAN,),
    Language.PHP: (Fore.MAGENTA, Fore.BLACK),
    Language.PROLOG: (Fore.BLUE, Fore.RED),
    Language.PURESCRIPT: (Fore.WHITE,),
    Language.PYTHON: (Fore.BLUE, Fore.YELLOW),
    Language.R: (Fore.WHITE, Fore.BLUE),
    Language.RACKET: (Fore.RED, Fore.WHITE, Fore.BLUE),
    Language.RUBY: (Fore.MAGENTA,),
    Language.RUST: (Fore.WHITE, Fore.RED),
    Language.SCALA: (Fore.BLUE,),
    Language.SHELL: (Fore.GREEN,),
    Language.SWIFT: (Fore.RED,),
    Language.TCL: (Fore.BLUE, Fore.WHITE, Fore.CYAN),
    Language.TEX: (Fore.WHITE, Fore.BLACK),
    Language.TYPESCRIPT: (Fore.CYAN,),
    Language.VUE: (Fore.GREEN, Fore.BLUE),
    Language.XML: (Fore.YELLOW, Fore.WHITE, Fore.GREEN),
    Language.ZIG: (Fore.YELLOW,),
    Language.UNKNOWN: (Fore.WHITE,),
}
