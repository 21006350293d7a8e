# mdxengine/markdown/postprocessors/island_restorer.py


def restore_islands(html, context):
    """
    Put the shortcode HTML parked by the shortcode expander back in place.

    This is the FIRST post-processor; everything after it sees the full
    document including widgets.
    """
    state = context.get("render_state")
    if state is None or not len(state.stash):
        return html
    return state.stash.restore(html)
