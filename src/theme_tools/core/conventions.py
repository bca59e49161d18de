"""Template conventions the upgrader enforces and the lint wrapper relies on."""

PACKAGE_JSON = "package.json"
NPM_LOCKFILE = "package-lock.json"
VERSION_BUMP_SCRIPT = "version-bump.mjs"
LINT_WRAPPER_PATH = ("scripts", "lint-wrapper.mjs")
STYLELINT_CONFIG = ".stylelintrc.json"

FLAT_STYLESHEET = "theme.css"
SCSS_SOURCE_DIR = ("src", "scss")
SCSS_GLOB = "src/scss/**/*.scss"

MODULE_TYPE = "module"
PACKAGE_MANAGER_VERSION = "pnpm@10.20.0"
PREINSTALL_SCRIPT = "node scripts/npm-proxy.mjs"
VERSION_SCRIPT = "node version-bump.mjs && git add manifest.json versions.json"

FIELD_ORDER = (
    "name",
    "version",
    "description",
    "main",
    "type",
    "scripts",
    "author",
    "license",
    "devDependencies",
    "dependencies",
    "packageManager",
)

LINTER = "stylelint"
SCSS_PLUGIN = "stylelint-scss"
SCSS_PLUGIN_SPEC = "stylelint-scss@^5.0.0"
SCSS_SYNTAX_PACKAGE = "postcss-scss"
SCSS_SYNTAX_SPEC = "postcss-scss@^4.0.0"
