from dais_cmdline import CommandLine, CommandLineError

cmd = CommandLine(
    "echo",
    ":greeting :{who}",
    {"greeting": "Hello", "who": "it's me"},
    swallow_stderr=True,
    expected_outcodes=[0],
)

print("command: ", cmd.command)
try:
    print("output: ", cmd.run())
except CommandLineError as exc:
    print("failed: ", exc)
print("exit status: ", cmd.exit_status)
