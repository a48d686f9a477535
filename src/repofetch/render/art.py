"""ASCII logos; ``{N}`` switches to the N-th logo color."""

from repofetch.language import Language

_UNKNOWN = r"""
{0}    _____
{0}   /  _  \
{0}  |__/ \  |
{0}       / /
{0}      | |
{0}      |_|
{0}       _
{0}      (_)
"""

_PYTHON = r"""
{0}        .--------.
{0}       / o       |
{0}   .---'------.  |{1}----.
{0}  /              |{1}     \
{0} |   .----------'{1}      |
{0} |   |{1} .-----------.   |
{0}  \  |{1} |              /
{0}   '-|{1} |  .--------'
{1}        |       o /
{1}        '--------'
"""

_RUST = r"""
{0}      _~^~^~_
{0}  \) /  {1}o o{0}  \ (/
{0}    '_   {1}-{0}   _'
{0}    / '-----' \
"""

_GO = r"""
{0}   ____  ___
{0}  / ___|/ _ \
{0} | |  _| | | |
{0} | |_| | |_| |
{0}  \____|\___/
"""

_C = r"""
{0}    _______
{0}   /  _____|
{0}  |  |
{0}  |  |{1}   ++
{0}  |  |_____
{0}   \_______|
"""

_CPP = r"""
{0}    _______
{0}   /  _____|{1}   _      _
{0}  |  |     {1}  _| |_  _| |_
{0}  |  |     {1} |_   _||_   _|
{0}  |  |_____{1}   |_|    |_|
{0}   \_______|
"""

_JAVASCRIPT = r"""
{0}      _  _____
{0}     | |/ ____|
{0}     | | (___
{0}  _  | |\___ \
{0} | |_| |____) |
{0}  \___/|_____/
"""

_TYPESCRIPT = r"""
{0}  _______ _____
{0} |__   __/ ____|
{0}    | | | (___
{0}    | |  \___ \
{0}    | |  ____) |
{0}    |_| |_____/
"""

_JAVA = r"""
{0}      (  )  (
{0}       )  (  )
{0}     _________
{0}    |         |{1}__
{0}    |         |{1}  |
{0}    |         |{1}__|
{0}     \_______/
{1}   _____________
"""

_SHELL = r"""
{0}  _____________
{0} |             |
{0} | $ _         |
{0} |             |
{0} |_____________|
"""

_MARKDOWN = r"""
{0}  ____________________
{0} |                    |
{0} | |\  /|    {1}  |  {0}    |
{0} | | \/ |    {1}\ | /{0}    |
{0} | |    |    {1} \|/ {0}    |
{0} |____________________|
"""

_ASSEMBLY = r"""
{0}  ___________________
{0} |  mov  eax, 1      |
{0} |  xor  ebx, ebx    |
{0} |  int  0x80        |
{0} |___________________|
"""

_CLOJURE = r"""
{0}     .-----------.
{0}   /   {1}.-----.{0}     \
{0}  |   {1}/  ( )  \{0}    |
{0}  |  {1}|  (   )  |{0}   |
{0}  |   {1}\  ( )  /{0}    |
{0}   \   {1}'-----'{0}    /
{0}     '-----------'
"""

_CMAKE = r"""
{0}          /\
{0}         /  \
{0}        / {1}/\{0} \
{0}       / {1}/  \{0} \
{0}      / {1}/ {2}/\{1} \{0} \
{0}     /_{1}/_{2}/__\{1}_\{0}_\
"""

_COFFEESCRIPT = r"""
{0}       ( (  (
{0}        ) )  )
{0}    ___________
{0}   |           |__
{0}   |           |  )
{0}   |           |_/
{0}    \_________/
"""

_CSHARP = r"""
{0}    _______   {1}  _  _
{0}   /  _____|  {1}_| || |_
{0}  |  |        {1}_  __  _|
{0}  |  |        {1}_| || |_
{0}  |  |_____   {1} |_||_|
{0}   \_______|
"""

_CSS = r"""
{0}  ______________
{0} |  {1}  ______  {0}  |
{0} |  {1} / ___/ {0}   |
{0} |  {1}/ /__   {0}   |
{0} |  {1}\___/   {0}   |
{0}  \     33     /
{0}   '----------'
"""

_D = r"""
{0}   ______
{0}  |  __  \
{0}  | |  |  |
{0}  | |  |  |
{0}  | |__|  |
{0}  |______/
"""

_DART = r"""
{0}      ______
{0}     /      \__
{0}    /   {1}__     \
{0}   |   {1}/  \    |
{0}   |   {1}\__/    |
{0}    \          /
{0}     \________/
"""

_DOCKERFILE = r"""
{0}                  ##
{0}            ## ## ##
{0}         ## ## ## ##
{1}    /-------------------\___/
{1}   (                    /
{2}    \____ o         __/
{2}         \________/
"""

_ELISP = r"""
{0}      _________
{0}    /  {1}_______{0}  \
{0}   |  {1}/  ____/{0}   |
{0}   |  {1}\___  \{0}    |
{0}   |  {1}/_____/{0}    |
{0}    \___________/
"""

_ELIXIR = r"""
{0}         /\
{0}        /  \
{0}       /    \
{0}      /      \
{0}     |        |
{0}     |    \   |
{0}      \    \ /
{0}       '----'
"""

_ELM = r"""
{0}  __________
{0} |\        /{1}|
{0} | \      /{1} |
{0} |  \{2}/\{0}  /{1}  |
{0} |  {2}/  \{3}\ {1}  |
{0} | {2}/____\{3} \{1} |
{0} |/_______{3}_\{1}|
"""

_ERLANG = r"""
{0}   ____________
{0}  |  ______    |
{0}  | |  ___|    |
{0}  | | |__      |
{0}  | |  __|     |
{0}  | | |____    |
{0}  | |______|   |
{0}  |____________|
"""

_FISH = r"""
{0}          ___
{0}     ___/   \__     {1}/
{0}   /            \__{1}/
{0}  <  o              {1}|
{0}   \        ____ __{1}\
{0}     \____/          {1}\
"""

_FORTH = r"""
{0}   _____
{0}  |  ___|__  _ __| |_| |__
{0}  | |_ / _ \| '__| __| '_ \
{0}  |  _| (_) | |  | |_| | | |
{0}  |_|  \___/|_|   \__|_| |_|
"""

_FORTRAN = r"""
{0}   ______
{0}  |  ____|{1}  ___{2}  ___
{0}  | |__  {1}  / _ \{2} / _ \
{0}  |  __| {1} | (_) |{2} | | |
{0}  | |    {1}  \__, |{2} |_| |
{0}  |_|    {1}    /_/{2} \___/
"""

_FSHARP = r"""
{0}        /\
{0}       /  \   {1} _  _
{0}      / /\ \  {1}| || |_
{0}     / /  \ \ {1}|_  __ _|
{0}     \ \  / / {1}|_  __ _|
{0}      \ \/ /  {1}  |_||_|
{0}       \  /
{0}        \/
"""

_GROOVY = r"""
{0}     _______
{0}    /  _____|  {1}   *
{0}   |  |  ___   {1}  ***
{0}   |  | |_  |  {1}*******
{0}   |  |___| |  {1}  ***
{0}    \_______/  {1}  * *
"""

_HASKELL = r"""
{0} \  {1}\
{0}  \  {1}\     {2}______
{0}   \  {1}\    {2}______
{0}   /  {1}/\
{0}  /  {1}/  \
"""

_HTML = r"""
{0}  ________________
{0} |  ____________  |
{0} | |  {1}<      >{0}  | |
{0} | |  {1}  </>   {0}  | |
{0} | |____________| |
{0}  \      __      /
{0}   \____/  \____/
"""

_IDRIS = r"""
{0}   ___     _     _
{0}  |_ _| __| |_ _(_)___
{0}   | | / _` | '_| (_-<
{0}  |___|\__,_|_| |_/__/
"""

_JULIA = r"""
{0}              {3}  __
{0}              {3} (  )
{0}     ____     {3}  ''
{0}    |_  _|   {1} __   {2}  __
{0}     _| |    {1}(  ){2}  (  )
{0}    |___|    {1} ''  {2}  ''
"""

_JUPYTER = r"""
{0}       .---.
{1}    .-'     '-.
{1}   /   {0}_   _{1}   \
{2}  |   {0}| | | |{2}   |
{1}   \   {0}|_|_|{1}   /
{1}    '-._____.-'
"""

_KOTLIN = r"""
{0} __________
{0} |       {1}/
{0} |     {1}/
{0} |   {1}/
{0} | {1}/{2}\
{0} |/  {2}\
{0} |     {2}\
{0} |______{2}_\
"""

_LISP = r"""
{0}    ____________
{0}   /            \
{0}  |  (lambda (x) |
{0}  |    (* x x))  |
{0}   \____________/
"""

_LUA = r"""
{0}        ______      ( )
{0}      /        \
{0}     /   ___    \
{0}    |   |         |
{0}    |   |___      |
{0}     \          /
{0}      \________/
"""

_NIM = r"""
{0}     .--'\  /'--.
{0}   .'    {1}\/{0}    '.
{0}  /  {1}_ __  _ _ __ {0}\
{0} |  {1}| '_ \| | '  \{0} |
{0}  \ {1}|_||_|_|_|_|_|{0}/
{0}   '--.________.--'
"""

_NIX = r"""
{0}      \\  {1}\\ //
{0}     ==\\__{1}\\/ //
{0}       //   {1}\\//
{1}    ==//     {0}//==
{1}     //\\{0}___//
{1}    // /\\{0}  \\==
{1}      // {0} \\  \\
"""

_OBJECTIVE_C = r"""
{0}     _______
{0}    /  ___  \   {1}  _______
{0}   |  |   |  |  {1} /  _____|
{0}   |  |   |  |  {1}|  |
{0}   |  |___|  |  {1}|  |_____
{0}    \_______/   {1} \_______|
"""

_OCAML = r"""
{0}                 __
{0}    _    _     _/  \
{0}   / \  / \   /  o  \
{0}  /   \/   \_/      |
{0}  |                /
{0}  |   __    __    |
{0}  |__|  |__|  |___|
"""

_ORG = r"""
{0}     ____
{0}    / __ \   {1}  * TODO
{0}   | |  | |  {2}  ** notes
{0}   | |__| |  {2}  *** ideas
{0}    \____/
"""

_PERL = r"""
{0}      __   _
{0}     /  \_/ \_____
{0}    /             \
{0}   |  o             \
{0}    \__/\   ___/\  |
{0}         |_|    |_||
"""

_PHP = r"""
{0}    _______________________
{0}   /  ____  _   _ ____     \
{0}  |  |  _ \| | | |  _ \     |
{0}  |  | |_) | |_| | |_) |    |
{0}  |  |  __/|  _  |  __/     |
{0}   \ |_|   |_| |_|_|       /
{0}    '---------------------'
"""

_PROLOG = r"""
{0}     ___________
{0}    /   {1}_   _{0}   \
{0}   |   {1}(o) (o){0}   |
{0}   |      ^      |
{0}   |   \_____/   |
{0}    \___________/
"""

_PURESCRIPT = r"""
{0}    ___________
{0}     \
{0}      \______
{0}      /
{0}    _/________
{0}
{0}    __________
"""

_R = r"""
{0}      _________________
{0}    /   {1}_________{0}       \
{0}   |   {1}|   ___   \{0}       |
{0}   |   {1}|  |___)  |{0}       |
{0}    \  {1}|   __   <{0}       /
{0}      '{1}|__|  \___\{0}----'
"""

_RACKET = r"""
{0}     .-------.
{0}   /    {1}/\{0}     \
{0}  |    {1}/  \{2}     |
{0}  |   {1}/ /\ \{2}    |
{0}  |  {1}/ /  \ \{2}   |
{0}   \{1}/_/    \_\{2} /
{0}     '-------'
"""

_RUBY = r"""
{0}     ________
{0}    /\  /\  /\
{0}   /__\/__\/__\
{0}   \  \    /  /
{0}    \  \  /  /
{0}     \  \/  /
{0}      \    /
{0}       \  /
{0}        \/
"""

_SCALA = r"""
{0}    __________
{0}   |__________|
{0}    __________
{0}   |__________|
{0}    __________
{0}   |__________|
"""

_SWIFT = r"""
{0}          \
{0}     \     \\
{0}      \\    \\\
{0}       \\\___\\\\
{0}        \\\\\\\\\\
{0}      ___\\\\\\\\\
{0}      \__________/
"""

_TCL = r"""
{0}         /\
{0}        /  \
{0}       / {1}/\{0} \
{0}      | {1}|  |{0} |
{0}      | {1}|{2}  {1}|{0} |
{0}      |  {1}\/{0}  |
{0}       \____/
"""

_TEX = r"""
{0}  _____
{0} |_   _|  {1}  __  __
{0}   | |   {1}  \ \/ /
{0}   | |  {1}___\  /
{0}   |_| {1}|___/  \
{0}        {1}|___/\_\
"""

_VUE = r"""
{0} ___             ___
{0} \  \           /  /
{0}  \  \ {1}_______{0}/  /
{0}   \  \{1}\     /{0}  /
{0}    \  \{1}\   /{0}  /
{0}     \  \{1}\_/{0}  /
{0}      \___{1}_{0}__/
"""

_XML = r"""
{0}   __   {1}__  __ _     {0}__
{0}  / /  {1}\ \/ /| |    {0} \ \
{0} / /   {1} \  / | |    {0}  \ \
{0} \ \   {1} /  \ | |___ {0}  / /
{0}  \_\ {1} /_/\_\|_____|{0} /_/
"""

_ZIG = r"""
{0}  ______   _____   _______
{0} |___  /  |_   _| |  _____|
{0}    / /     | |   | |  ___
{0}   / /__   _| |_  | |_|_ |
{0}  /_____| |_____| |______|
"""

ASCII_ART: dict[Language, str] = {
    Language.ASSEMBLY: _ASSEMBLY,
    Language.C: _C,
    Language.CLOJURE: _CLOJURE,
    Language.CMAKE: _CMAKE,
    Language.COFFEESCRIPT: _COFFEESCRIPT,
    Language.CPP: _CPP,
    Language.CSHARP: _CSHARP,
    Language.CSS: _CSS,
    Language.D: _D,
    Language.DART: _DART,
    Language.DOCKERFILE: _DOCKERFILE,
    Language.ELISP: _ELISP,
    Language.ELIXIR: _ELIXIR,
    Language.ELM: _ELM,
    Language.ERLANG: _ERLANG,
    Language.FISH: _FISH,
    Language.FORTH: _FORTH,
    Language.FORTRAN: _FORTRAN,
    Language.FSHARP: _FSHARP,
    Language.GO: _GO,
    Language.GROOVY: _GROOVY,
    Language.HASKELL: _HASKELL,
    Language.HTML: _HTML,
    Language.IDRIS: _IDRIS,
    Language.JAVA: _JAVA,
    Language.JAVASCRIPT: _JAVASCRIPT,
    Language.JULIA: _JULIA,
    Language.JUPYTER: _JUPYTER,
    Language.KOTLIN: _KOTLIN,
    Language.LISP: _LISP,
    Language.LUA: _LUA,
    Language.MARKDOWN: _MARKDOWN,
    Language.NIM: _NIM,
    Language.NIX: _NIX,
    Language.OBJECTIVE_C: _OBJECTIVE_C,
    Language.OCAML: _OCAML,
    Language.ORG: _ORG,
    Language.PERL: _PERL,
    Language.PHP: _PHP,
    Language.PROLOG: _PROLOG,
    Language.PURESCRIPT: _PURESCRIPT,
    Language.PYTHON: _PYTHON,
    Language.R: _R,
    Language.RACKET: _RACKET,
    Language.RUBY: _RUBY,
    Language.RUST: _RUST,
    Language.SCALA: _SCALA,
    Language.SHELL: _SHELL,
    Language.SWIFT: _SWIFT,
    Language.TCL: _TCL,
    Language.TEX: _TEX,
    Language.TYPESCRIPT: _TYPESCRIPT,
    Language.VUE: _VUE,
    Language.XML: _XML,
    Language.ZIG: _ZIG,
    Language.UNKNOWN: _UNKNOWN,
}


def ascii_art(language: Language) -> str:
    return ASCII_ART[language].strip("\n")
