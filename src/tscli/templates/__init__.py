"""
tscli.templates - Jinja2 Template Files
=======================================

Templates for the files ``tsci init`` writes. They use the ``.j2``
extension and are rendered by the generator module.

Available Templates
-------------------
    - index.tsx.j2: Example board (a resistor, a capacitor and one trace)
    - npmrc.j2: Scoped registry line for the tscircuit package registry
    - tsconfig.json.j2: TypeScript compiler options for tscircuit
    - gitignore.j2: Git ignore patterns (written as ``.gitignore``)

Template Context
----------------
    options : InitOptions
        Options of the current run

    settings : CliSettings
        Registry and version settings

Usage
-----
>>> from tscli.config import CliSettings
>>> from tscli.generator import create_jinja_env
>>> env = create_jinja_env()
>>> env.get_template("npmrc.j2").render(settings=CliSettings())
'@tsci:registry=https://npm.tscircuit.com\\n'
"""

# Templates are loaded dynamically by Jinja2's PackageLoader.
