"""
Basic guardclause usage.

Validates the arguments of a small job scheduler, both synchronously and
with an asynchronous lookup.

Run:
    python examples/basic_usage.py
"""

import asyncio
import logging

from guardclause import UNDEFINED, Guard, GuardError

logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

KNOWN_QUEUES = {"default", "priority"}


def schedule(job_name, priority, tags, queue=UNDEFINED):
    job_name = Guard.against.null_or_whitespace(job_name, "job_name")
    priority = Guard.against.out_of_range(priority, (1, 10), "priority")
    tags = Guard.against.empty_array(tags, "tags")
    queue = Guard.against.null_or_undefined(queue, "queue")
    return {"job": job_name, "priority": priority, "tags": tags, "queue": queue}


async def queue_exists(name):
    await asyncio.sleep(0)
    return name in KNOWN_QUEUES


async def schedule_checked(job_name, queue):
    queue = await Guard.against.expression_async(
        queue, queue_exists, "Queue is not configured", "queue"
    )
    return schedule(job_name, 5, ["nightly"], queue)


def main():
    print(schedule("rebuild-index", 3, ["search"], "default"))

    for args in [("   ", 3, ["x"], "default"), ("ok", 11, ["x"], "default"), ("ok", 3, [])]:
        try:
            schedule(*args)
        except GuardError as e:
            print(f"rejected {e.parameter_name}: {e}")

    print(asyncio.run(schedule_checked("report", "priority")))
    try:
        asyncio.run(schedule_checked("report", "missing"))
    except GuardError as e:
        print(f"rejected {e.parameter_name}: {e}")


if __name__ == "__main__":
    main()
