"""Built-in file type definitions.

Each definition maps one or more type alias names to the path glob patterns
that identify files of that type. The first alias is the canonical name.
Definitions are sorted by canonical name.

Adapted from the default file types of the ripgrep ``ignore`` crate (MIT).
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final


@dataclass(slots=True, frozen=True)
class TypeDefinition:
    """Immutable pair of type alias names and their path glob patterns."""

    names: tuple[str, ...]
    globs: tuple[str, ...]

    @property
    def canonical_name(self) -> str:
        """The first alias, used as the display and suggestion identity."""
        return self.names[0]


type TypeTable = Sequence[TypeDefinition]


# fmt: off
DEFAULT_TYPES: Final[tuple[TypeDefinition, ...]] = (
    TypeDefinition(("ada",), ("*.adb", "*.ads")),
    TypeDefinition(("agda",), ("*.agda", "*.lagda")),
    TypeDefinition(("aidl",), ("*.aidl",)),
    TypeDefinition(("alire",), ("alire.toml",)),
    TypeDefinition(("amake",), ("*.mk", "*.bp")),
    TypeDefinition(("apk",), ("*.apk", "*.apks", "*.aab", "*.xapk", "*.apkm", "*.akp")),
    TypeDefinition(("appleimg",), ("*.dmg", "*.smi", "*.img")),
    TypeDefinition(("asciidoc",), ("*.adoc", "*.asc", "*.asciidoc")),
    TypeDefinition(("asm",), ("*.asm", "*.s", "*.S")),
    TypeDefinition(
        ("asp",),
        (
            "*.aspx", "*.aspx.cs", "*.aspx.vb", "*.ascx", "*.ascx.cs", "*.ascx.vb",
            "*.asp",
        ),
    ),
    TypeDefinition(("ats",), ("*.ats", "*.dats", "*.sats", "*.hats")),
    TypeDefinition(("avro",), ("*.avdl", "*.avpr", "*.avsc")),
    TypeDefinition(("awk",), ("*.awk",)),
    TypeDefinition(("bat", "batch"), ("*.bat",)),
    TypeDefinition(
        ("bazel",),
        (
            "*.bazel", "*.bzl", "*.BUILD", "*.bazelrc", "BUILD", "MODULE.bazel",
            "WORKSPACE", "WORKSPACE.bazel",
        ),
    ),
    TypeDefinition(
        ("bitbake",),
        (
            "*.bb", "*.bbappend", "*.bbclass", "*.conf", "*.inc",
        ),
    ),
    TypeDefinition(("bmp",), ("*.bmp", "*.dib")),
    TypeDefinition(("brotli",), ("*.br",)),
    TypeDefinition(("buildstream",), ("*.bst",)),
    TypeDefinition(("bzip2",), ("*.bz2", "*.tbz2")),
    TypeDefinition(("c",), ("*.[chH]", "*.[chH].in", "*.cats")),
    TypeDefinition(("cabal",), ("*.cabal",)),
    TypeDefinition(("candid",), ("*.did",)),
    TypeDefinition(("carp",), ("*.carp",)),
    TypeDefinition(("cbor",), ("*.cbor",)),
    TypeDefinition(("ceylon",), ("*.ceylon",)),
    TypeDefinition(("clojure",), ("*.clj", "*.cljc", "*.cljs", "*.cljx")),
    TypeDefinition(("cmake",), ("*.cmake", "CMakeLists.txt")),
    TypeDefinition(("cmd",), ("*.bat", "*.cmd")),
    TypeDefinition(("cml",), ("*.cml",)),
    TypeDefinition(("coffeescript",), ("*.coffee",)),
    TypeDefinition(("config",), ("*.cfg", "*.conf", "*.config", "*.ini")),
    TypeDefinition(("coq",), ("*.v",)),
    TypeDefinition(
        ("cpp",),
        (
            "*.[ChH]", "*.cc", "*.[ch]pp", "*.[ch]xx", "*.hh", "*.inl", "*.[ChH].in",
            "*.cc.in", "*.[ch]pp.in", "*.[ch]xx.in", "*.hh.in",
        ),
    ),
    TypeDefinition(("creole",), ("*.creole",)),
    TypeDefinition(("crystal",), ("Projectfile", "*.cr", "*.ecr", "shard.yml")),
    TypeDefinition(("cs",), ("*.cs",)),
    TypeDefinition(("csharp",), ("*.cs",)),
    TypeDefinition(("cshtml",), ("*.cshtml",)),
    TypeDefinition(("csproj",), ("*.csproj",)),
    TypeDefinition(("css",), ("*.css", "*.scss")),
    TypeDefinition(("csv",), ("*.csv",)),
    TypeDefinition(("cuda",), ("*.cu", "*.cuh")),
    TypeDefinition(("cython",), ("*.pyx", "*.pxi", "*.pxd")),
    TypeDefinition(("d",), ("*.d",)),
    TypeDefinition(("dart",), ("*.dart",)),
    TypeDefinition(("deb",), ("*.deb", "*.udeb")),
    TypeDefinition(("devicetree",), ("*.dts", "*.dtsi")),
    TypeDefinition(("dhall",), ("*.dhall",)),
    TypeDefinition(("diff",), ("*.patch", "*.diff")),
    TypeDefinition(("dita",), ("*.dita", "*.ditamap", "*.ditaval")),
    TypeDefinition(("docker",), ("*Dockerfile*",)),
    TypeDefinition(("dockercompose",), ("docker-compose.yml", "docker-compose.*.yml")),
    TypeDefinition(("dts",), ("*.dts", "*.dtsi")),
    TypeDefinition(("dvc",), ("Dvcfile", "*.dvc")),
    TypeDefinition(("ebuild",), ("*.ebuild", "*.eclass")),
    TypeDefinition(("edn",), ("*.edn",)),
    TypeDefinition(("elisp",), ("*.el",)),
    TypeDefinition(
        ("elixir",),
        (
            "*.ex", "*.eex", "*.exs", "*.heex", "*.leex", "*.livemd",
        ),
    ),
    TypeDefinition(("elm",), ("*.elm",)),
    TypeDefinition(("erb",), ("*.erb",)),
    TypeDefinition(("erlang",), ("*.erl", "*.hrl")),
    TypeDefinition(("exe",), ("*.[Ee][Xx][Ee]",)),
    TypeDefinition(("fennel",), ("*.fnl",)),
    TypeDefinition(("fidl",), ("*.fidl",)),
    TypeDefinition(("fish",), ("*.fish",)),
    TypeDefinition(("flatbuffers",), ("*.fbs",)),
    TypeDefinition(
        ("fortran",),
        (
            "*.f", "*.F", "*.f77", "*.F77", "*.pfo", "*.f90", "*.F90", "*.f95", "*.F95",
        ),
    ),
    TypeDefinition(("fsharp",), ("*.fs", "*.fsx", "*.fsi")),
    TypeDefinition(("fut",), ("*.fut",)),
    TypeDefinition(("gap",), ("*.g", "*.gap", "*.gi", "*.gd", "*.tst")),
    TypeDefinition(("gif",), ("*.gif",)),
    TypeDefinition(("gn",), ("*.gn", "*.gni")),
    TypeDefinition(("go",), ("*.go",)),
    TypeDefinition(("gprbuild",), ("*.gpr",)),
    TypeDefinition(
        ("gradle",),
        (
            "*.gradle", "*.gradle.kts", "gradle.properties", "gradle-wrapper.*",
            "gradlew", "gradlew.bat",
        ),
    ),
    TypeDefinition(("graphql",), ("*.graphql", "*.graphqls")),
    TypeDefinition(("groovy",), ("*.groovy", "*.gradle")),
    TypeDefinition(("gzip",), ("*.gz", "*.tgz")),
    TypeDefinition(("h",), ("*.h", "*.hh", "*.hpp")),
    TypeDefinition(("haml",), ("*.haml",)),
    TypeDefinition(("hare",), ("*.ha",)),
    TypeDefinition(("haskell",), ("*.hs", "*.lhs", "*.cpphs", "*.c2hs", "*.hsc")),
    TypeDefinition(("hbs",), ("*.hbs",)),
    TypeDefinition(("hs",), ("*.hs", "*.lhs")),
    TypeDefinition(("html",), ("*.htm", "*.html", "*.ejs")),
    TypeDefinition(("hy",), ("*.hy",)),
    TypeDefinition(("idris",), ("*.idr", "*.lidr")),
    TypeDefinition(("janet",), ("*.janet",)),
    TypeDefinition(("jar",), ("*.jar",)),
    TypeDefinition(("java",), ("*.java", "*.jsp", "*.jspx", "*.properties")),
    TypeDefinition(("jinja",), ("*.j2", "*.jinja", "*.jinja2")),
    TypeDefinition(("jl",), ("*.jl",)),
    TypeDefinition(("jpg",), ("*.jpg", "*.jpeg")),
    TypeDefinition(("js",), ("*.js", "*.jsx", "*.vue", "*.cjs", "*.mjs")),
    TypeDefinition(("json",), ("*.json", "composer.lock", "*.sarif")),
    TypeDefinition(("jsonl",), ("*.jsonl",)),
    TypeDefinition(("julia",), ("*.jl",)),
    TypeDefinition(("jupyter",), ("*.ipynb", "*.jpynb")),
    TypeDefinition(("k",), ("*.k",)),
    TypeDefinition(("kotlin",), ("*.kt", "*.kts")),
    TypeDefinition(("lean",), ("*.lean",)),
    TypeDefinition(("less",), ("*.less",)),
    TypeDefinition(
        ("license",),
        (
            "COPYING", "COPYING[.-]*", "COPYRIGHT", "COPYRIGHT[.-]*", "EULA",
            "EULA[.-]*", "licen[cs]e", "licen[cs]e.*", "LICEN[CS]E", "LICEN[CS]E[.-]*",
            "*[.-]LICEN[CS]E*", "NOTICE", "NOTICE[.-]*", "PATENTS", "PATENTS[.-]*",
            "UNLICEN[CS]E", "UNLICEN[CS]E[.-]*", "agpl[.-]*", "gpl[.-]*", "lgpl[.-]*",
            "AGPL-*[0-9]*", "APACHE-*[0-9]*", "BSD-*[0-9]*", "CC-BY-*", "GFDL-*[0-9]*",
            "GNU-*[0-9]*", "GPL-*[0-9]*", "LGPL-*[0-9]*", "MIT-*[0-9]*", "MPL-*[0-9]*",
            "OFL-*[0-9]*",
        ),
    ),
    TypeDefinition(("lilypond",), ("*.ly", "*.ily")),
    TypeDefinition(("lisp",), ("*.el", "*.jl", "*.lisp", "*.lsp", "*.sc", "*.scm")),
    TypeDefinition(("lock",), ("*.lock", "package-lock.json")),
    TypeDefinition(("log",), ("*.log",)),
    TypeDefinition(("lua",), ("*.lua",)),
    TypeDefinition(("lz4",), ("*.lz4",)),
    TypeDefinition(("lzma",), ("*.lzma",)),
    TypeDefinition(("m4",), ("*.ac", "*.m4")),
    TypeDefinition(
        ("make",),
        (
            "[Gg][Nn][Uu]makefile", "[Mm]akefile", "[Gg][Nn][Uu]makefile.am",
            "[Mm]akefile.am", "[Gg][Nn][Uu]makefile.in", "[Mm]akefile.in", "*.mk",
            "*.mak",
        ),
    ),
    TypeDefinition(("mako",), ("*.mako", "*.mao")),
    TypeDefinition(("man",), ("*.[0-9lnpx]", "*.[0-9][cEFMmpSx]")),
    TypeDefinition(
        ("markdown", "md"),
        (
            "*.markdown", "*.md", "*.mdown", "*.mdwn", "*.mkd", "*.mkdn", "*.mdx",
        ),
    ),
    TypeDefinition(("matlab",), ("*.m",)),
    TypeDefinition(("meson",), ("meson.build", "meson_options.txt", "meson.options")),
    TypeDefinition(("minified",), ("*.min.html", "*.min.css", "*.min.js")),
    TypeDefinition(("mint",), ("*.mint",)),
    TypeDefinition(("mk",), ("mkfile",)),
    TypeDefinition(("ml",), ("*.ml",)),
    TypeDefinition(("motoko",), ("*.mo",)),
    TypeDefinition(
        ("msbuild",),
        (
            "*.csproj", "*.fsproj", "*.vcxproj", "*.proj", "*.props", "*.targets",
            "*.sln",
        ),
    ),
    TypeDefinition(("nim",), ("*.nim", "*.nimf", "*.nimble", "*.nims")),
    TypeDefinition(("nix",), ("*.nix",)),
    TypeDefinition(("objc",), ("*.h", "*.m")),
    TypeDefinition(("objcpp",), ("*.h", "*.mm")),
    TypeDefinition(("ocaml",), ("*.ml", "*.mli", "*.mll", "*.mly")),
    TypeDefinition(("org",), ("*.org", "*.org_archive")),
    TypeDefinition(("pants",), ("BUILD",)),
    TypeDefinition(("pascal",), ("*.pas", "*.dpr", "*.lpr", "*.pp", "*.inc")),
    TypeDefinition(("pdf",), ("*.pdf",)),
    TypeDefinition(
        ("perl",),
        (
            "*.perl", "*.pl", "*.PL", "*.plh", "*.plx", "*.pm", "*.t",
        ),
    ),
    TypeDefinition(
        ("php",),
        (
            "*.php", "*.php3", "*.php4", "*.php5", "*.php7", "*.php8", "*.pht",
            "*.phtml",
        ),
    ),
    TypeDefinition(("png",), ("*.png",)),
    TypeDefinition(("po",), ("*.po",)),
    TypeDefinition(("pod",), ("*.pod",)),
    TypeDefinition(("postscript",), ("*.eps", "*.ps")),
    TypeDefinition(("prolog",), ("*.pl", "*.pro", "*.prolog", "*.P")),
    TypeDefinition(("protobuf",), ("*.proto",)),
    TypeDefinition(("ps",), ("*.cdxml", "*.ps1", "*.ps1xml", "*.psd1", "*.psm1")),
    TypeDefinition(("puppet",), ("*.epp", "*.erb", "*.pp", "*.rb")),
    TypeDefinition(("purs",), ("*.purs",)),
    TypeDefinition(("py", "python"), ("*.py", "*.pyi")),
    TypeDefinition(("qmake",), ("*.pro", "*.pri", "*.prf")),
    TypeDefinition(("qml",), ("*.qml",)),
    TypeDefinition(("r",), ("*.R", "*.r", "*.Rmd", "*.Rnw")),
    TypeDefinition(("racket",), ("*.rkt",)),
    TypeDefinition(
        ("raku",),
        (
            "*.raku", "*.rakumod", "*.rakudoc", "*.rakutest", "*.p6", "*.pl6", "*.pm6",
        ),
    ),
    TypeDefinition(("rdoc",), ("*.rdoc",)),
    TypeDefinition(("readme",), ("README*", "*README")),
    TypeDefinition(("reasonml",), ("*.re", "*.rei")),
    TypeDefinition(("red",), ("*.r", "*.red", "*.reds")),
    TypeDefinition(("rescript",), ("*.res", "*.resi")),
    TypeDefinition(("robot",), ("*.robot",)),
    TypeDefinition(("rpm",), ("*.rpm",)),
    TypeDefinition(("rst",), ("*.rst",)),
    TypeDefinition(
        ("ruby",),
        (
            "config.ru", "Gemfile", ".irbrc", "Rakefile", "*.gemspec", "*.rb", "*.rbw",
        ),
    ),
    TypeDefinition(("rust",), ("*.rs",)),
    TypeDefinition(("sass",), ("*.sass", "*.scss")),
    TypeDefinition(("scala",), ("*.scala", "*.sbt")),
    TypeDefinition(
        ("sh",),
        (
            ".login", ".logout", ".profile", "profile", ".bash_login", "bash_login",
            ".bash_logout", "bash_logout", ".bash_profile", "bash_profile", ".bashrc",
            "bashrc", "*.bashrc", ".cshrc", "*.cshrc", ".kshrc", "*.kshrc", ".tcshrc",
            ".zshenv", "zshenv", ".zlogin", "zlogin", ".zlogout", "zlogout",
            ".zprofile", "zprofile", ".zshrc", "zshrc", "*.bash", "*.csh", "*.ksh",
            "*.sh", "*.tcsh", "*.zsh",
        ),
    ),
    TypeDefinition(("slim",), ("*.skim", "*.slim", "*.slime")),
    TypeDefinition(("smarty",), ("*.tpl",)),
    TypeDefinition(("sml",), ("*.sml", "*.sig")),
    TypeDefinition(("solidity",), ("*.sol",)),
    TypeDefinition(("soy",), ("*.soy",)),
    TypeDefinition(("spark",), ("*.spark",)),
    TypeDefinition(("spec",), ("*.spec",)),
    TypeDefinition(("sql",), ("*.sql", "*.psql")),
    TypeDefinition(("stylus",), ("*.styl",)),
    TypeDefinition(("sv",), ("*.v", "*.vg", "*.sv", "*.svh", "*.h")),
    TypeDefinition(("svg",), ("*.svg",)),
    TypeDefinition(("swift",), ("*.swift",)),
    TypeDefinition(("swig",), ("*.def", "*.i")),
    TypeDefinition(
        ("systemd",),
        (
            "*.automount", "*.conf", "*.device", "*.link", "*.mount", "*.path",
            "*.scope", "*.service", "*.slice", "*.socket", "*.swap", "*.target",
            "*.timer",
        ),
    ),
    TypeDefinition(("tar",), ("*.tar", "*.tar.*", "*.tgz", "*.tbz2", "*.txz")),
    TypeDefinition(("taskpaper",), ("*.taskpaper",)),
    TypeDefinition(("tcl",), ("*.tcl",)),
    TypeDefinition(
        ("tex",),
        (
            "*.tex", "*.ltx", "*.cls", "*.sty", "*.bib", "*.dtx", "*.ins",
        ),
    ),
    TypeDefinition(("texinfo",), ("*.texi",)),
    TypeDefinition(("textile",), ("*.textile",)),
    TypeDefinition(
        ("tf",),
        (
            "*.tf", "*.auto.tfvars", "terraform.tfvars", "*.tf.json",
            "*.auto.tfvars.json", "terraform.tfvars.json", "*.terraformrc",
            "terraform.rc", "*.tfrc", "*.terraform.lock.hcl",
        ),
    ),
    TypeDefinition(("thrift",), ("*.thrift",)),
    TypeDefinition(("toml",), ("*.toml", "Cargo.lock")),
    TypeDefinition(("ts", "typescript"), ("*.ts", "*.tsx", "*.cts", "*.mts")),
    TypeDefinition(("twig",), ("*.twig",)),
    TypeDefinition(("txt",), ("*.txt",)),
    TypeDefinition(("typoscript",), ("*.typoscript", "*.ts")),
    TypeDefinition(("usd",), ("*.usd", "*.usda", "*.usdc")),
    TypeDefinition(("v",), ("*.v", "*.vsh")),
    TypeDefinition(("vala",), ("*.vala",)),
    TypeDefinition(("vb",), ("*.vb",)),
    TypeDefinition(("vcl",), ("*.vcl",)),
    TypeDefinition(("verilog",), ("*.v", "*.vh", "*.sv", "*.svh")),
    TypeDefinition(("vhdl",), ("*.vhd", "*.vhdl")),
    TypeDefinition(
        ("vim",),
        (
            "*.vim", ".vimrc", ".gvimrc", "vimrc", "gvimrc", "_vimrc", "_gvimrc",
        ),
    ),
    TypeDefinition(
        ("vimscript",),
        (
            "*.vim", ".vimrc", ".gvimrc", "vimrc", "gvimrc", "_vimrc", "_gvimrc",
        ),
    ),
    TypeDefinition(("webidl",), ("*.idl", "*.webidl", "*.widl")),
    TypeDefinition(("webp",), ("*.webp",)),
    TypeDefinition(("wiki",), ("*.mediawiki", "*.wiki")),
    TypeDefinition(
        ("xml",),
        (
            "*.xml", "*.xml.dist", "*.dtd", "*.xsl", "*.xslt", "*.xsd", "*.xjb",
            "*.rng", "*.sch", "*.xhtml",
        ),
    ),
    TypeDefinition(("xz",), ("*.xz", "*.txz")),
    TypeDefinition(("yacc",), ("*.y",)),
    TypeDefinition(("yaml",), ("*.yaml", "*.yml")),
    TypeDefinition(("yang",), ("*.yang",)),
    TypeDefinition(("z",), ("*.Z",)),
    TypeDefinition(("zig",), ("*.zig",)),
    TypeDefinition(("zip",), ("*.zip", "*.zipx", "*.z01", "*.zx01")),
    TypeDefinition(
        ("zsh",),
        (
            ".zshenv", "zshenv", ".zlogin", "zlogin", ".zlogout", "zlogout",
            ".zprofile", "zprofile", ".zshrc", "zshrc", "*.zsh",
        ),
    ),
    TypeDefinition(("zstd",), ("*.zst", "*.zstd")),
)
# fmt: on
