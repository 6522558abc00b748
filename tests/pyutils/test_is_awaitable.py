from asyncio import Future, get_running_loop, sleep

from pytest import mark

from fragment_matcher.pyutils import is_awaitable


def describe_is_awaitable():
    def declines_plain_results():
        assert not is_awaitable(None)
        assert not is_awaitable({"__schema": {"types": []}})
        assert not is_awaitable([])
        assert not is_awaitable("{ __schema { types { name } } }")

    def declines_functions():
        async def some_async_function():
            pass  # pragma: no cover

        assert not is_awaitable(some_async_function)
        assert not is_awaitable(lambda: None)

    @mark.asyncio
    async def recognizes_a_coroutine_object():
        async def some_async_function():
            await sleep(0)

        some_coroutine = some_async_function()
        assert is_awaitable(some_coroutine)
        await some_coroutine

    @mark.asyncio
    async def recognizes_a_future_object():
        future: Future = get_running_loop().create_future()
        assert is_awaitable(future)
        future.cancel()

    def recognizes_an_object_with_await_method():
        class SomeAwaitable:
            def __await__(self):
                yield  # pragma: no cover

        assert is_awaitable(SomeAwaitable())
