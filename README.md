# nci

Use the right package manager. `nci` finds the nearest lock file and reads the
`packageManager` field of `package.json` in your project. It then runs the
matching command for npm, yarn, yarn berry, pnpm, pnpm 6 or bun.

## Install

```
pip install nci
```

## Commands

| Command | Does                      | Example                                        |
|---------|---------------------------|------------------------------------------------|
| `ni`    | install / add packages    | `ni`, `ni axios`, `ni vite -D`, `ni eslint -g` |
| `nr`    | run a script              | `nr`, `nr dev`, `nr build --watch`, `nr -`     |
| `nlx`   | execute a package binary  | `nlx esbuild --version`                        |
| `nu`    | upgrade                   | `nu`, `nu -i`                                  |
| `nun`   | uninstall                 | `nun axios`, `nun eslint -g`                   |
| `nci`   | clean (frozen) install    | `nci`                                          |
| `na`    | the agent itself          | `na run test`                                  |

Some examples:

- With a `pnpm-lock.yaml`, `ni axios` runs `pnpm add axios`.
- With npm, `nr build --watch` runs `npm run build -- --watch`.
- `ni --frozen` runs the frozen-lockfile install of the detected agent.
- `ni -i` searches the npm registry and asks which package to install, and how.
- `nr` with no arguments lists the scripts in `package.json` to choose from.
- `nr -` runs the last script again. The last script is kept in
  `nci/_storage.json` under the system temporary directory.
- `-v` or `--version` prints the version. `-h` or `--help` prints a short help.
- `-C <dir>` as the first argument, followed by at least one more argument,
  runs in another directory.

When an agent has no equivalent for a command, the command fails with a message
and exit code 1. For example, `nu -i` fails with npm.

## Agent selection

Commands with `-g` use the configured global agent. Otherwise the agent is the
one detected in the project. If none is detected, the configured default agent
is used. If that is not set either, npm is used in CI (when `CI` is set), and you
are asked to choose in all other cases.

If the detected agent is not on your `PATH`, you are asked whether to install it
globally with npm. In CI the command exits instead. `nci` installs it without
asking.

If `volta` is on your `PATH`, commands are run through `volta run`.

## Configuration

A `~/.nirc` file, or the file named by `NI_CONFIG_FILE`, can set defaults:

```
default_agent=pnpm
global_agent=npm
```

`default_agent` is used when no agent is detected. Any value that is not an agent
name, such as `prompt`, leaves it unset. `global_agent` is used for `-g`
commands and defaults to npm.

## Limitations

Prompts are plain numbered lists read from standard input. They are not
arrow-key menus.