"""credent -- store and reload user credentials for command line tools.

Credentials are collected from the terminal once, written to a TOML file in
the user's configuration directory, and reloaded on subsequent runs. A single
file holds any number of named *profiles*, so one tool can keep credentials
for several accounts or environments side by side.

Typical usage::

    from credent.fs import CredentialsFileLoader, CredentialsFileStorer
    from credent.model import Credentials, Password, Profile

    profile = await CredentialsFileLoader.load("my-tool")
    if profile is None:
        credentials = Credentials(username="me", password=Password("secret"))
        profile = Profile.new_default(credentials)
        await CredentialsFileStorer.store("my-tool", profile)

Modules:
    app: Typer application and CLI entry point.
    model: Credential value types and the profile collection.
    fs: Credentials file path resolution, loading and storing.
    cli: Terminal prompts for usernames and passwords.
    config: Platform directories and password encoding selection.
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric exit codes.
    output: stdout/stderr formatting for the CLI.
"""

__version__ = "0.4.0"
