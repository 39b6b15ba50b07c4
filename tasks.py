import invoke


@invoke.task()
def test_run(ctx: invoke.Context):
    ctx.run("pytest --cov=narigama_maybe --cov-report=xml:coverage.xml")
