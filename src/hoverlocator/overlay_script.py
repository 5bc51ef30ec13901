from __future__ import annotations

from .dom_extractor import OVERLAY_MARKER_ATTR

TOGGLE_BINDING = "hoverlocatorToggle"
STATE_BINDING = "hoverlocatorState"
SYNTHESIZE_BINDING = "hoverlocatorSynthesize"
PLACE_BINDING = "hoverlocatorPlace"
LEAVE_BINDING = "hoverlocatorLeave"
COPY_BINDING = "hoverlocatorCopy"

# Alt+Shift+<code>; digits map to the scheme keys used by InspectorController.
TOGGLE_KEY_CODE = "KeyI"
COPY_KEY_CODES = {
    "Digit1": "css",
    "Digit2": "role",
    "Digit3": "xpath",
}

_OVERLAY_TEMPLATE = r"""
(() => {
  if (window.__hoverlocatorInstalled) {
    return;
  }
  window.__hoverlocatorInstalled = true;

  const MARKER = '__MARKER__';
  const COPY_KEYS = __COPY_KEYS__;
  const state = { active: false, target: null, size: null, seq: 0, moving: false };

  function mark(node) {
    node.setAttribute(MARKER, '');
    return node;
  }

  function isOverlay(node) {
    return Boolean(node && node.closest && node.closest(`[${MARKER}]`));
  }

  function install() {
    const style = mark(document.createElement('style'));
    style.textContent = `
      .hoverlocator-highlight {
        position: fixed; pointer-events: none; z-index: 2147483645;
        outline: 2px solid #0284c7; background: rgba(2, 132, 199, 0.12); display: none;
      }
      .hoverlocator-tooltip {
        position: fixed; z-index: 2147483646; max-width: 520px; padding: 10px 12px;
        background: #0f172a; color: #f8fafc; font: 12px/1.45 Menlo, Consolas, monospace;
        border-radius: 6px; box-shadow: 0 6px 18px rgba(15, 23, 42, 0.35);
        pointer-events: none; display: none; word-break: break-all;
      }
      .hoverlocator-tooltip code { color: #7dd3fc; }
      .hoverlocator-section { margin-bottom: 8px; }
      .hoverlocator-section:last-child { margin-bottom: 0; }
      .hoverlocator-hint { color: #94a3b8; }
      .hoverlocator-toggle {
        position: fixed; right: 16px; bottom: 16px; z-index: 2147483647;
        padding: 8px 12px; border: 0; border-radius: 6px; cursor: pointer;
        background: #0284c7; color: #ffffff; font: 13px sans-serif;
      }
    `;
    (document.head || document.documentElement).appendChild(style);

    const highlight = mark(document.createElement('div'));
    highlight.className = 'hoverlocator-highlight';
    const tooltip = mark(document.createElement('div'));
    tooltip.className = 'hoverlocator-tooltip';
    const button = mark(document.createElement('button'));
    button.className = 'hoverlocator-toggle';
    button.type = 'button';
    document.body.appendChild(highlight);
    document.body.appendChild(tooltip);
    document.body.appendChild(button);

    function hide() {
      tooltip.style.display = 'none';
      highlight.style.display = 'none';
    }

    function setActive(active) {
      state.active = Boolean(active);
      button.textContent = state.active ? 'Turn Inspector Off' : 'Turn Inspector On';
      state.target = null;
      state.size = null;
      state.seq += 1;
      hide();
    }

    function outline(el) {
      const rect = el.getBoundingClientRect();
      highlight.style.left = `${rect.left}px`;
      highlight.style.top = `${rect.top}px`;
      highlight.style.width = `${rect.width}px`;
      highlight.style.height = `${rect.height}px`;
      highlight.style.display = 'block';
    }

    function pointerOf(event) {
      return {
        x: event.clientX,
        y: event.clientY,
        viewport_width: window.innerWidth,
        viewport_height: window.innerHeight,
      };
    }

    async function place(pointer) {
      if (!state.size) {
        return;
      }
      const placement = await window.__PLACE__(pointer, state.size);
      if (placement) {
        tooltip.style.left = `${placement.left}px`;
        tooltip.style.top = `${placement.top}px`;
      }
    }

    async function toggle() {
      setActive(await window.__TOGGLE__());
    }

    async function copy(scheme) {
      const text = await window.__COPY__(scheme);
      if (!text) {
        return;
      }
      try {
        await navigator.clipboard.writeText(text);
      } catch (_) {
        const area = mark(document.createElement('textarea'));
        area.value = text;
        document.body.appendChild(area);
        area.select();
        document.execCommand('copy');
        area.remove();
      }
    }

    button.addEventListener('click', (event) => {
      event.preventDefault();
      event.stopPropagation();
      toggle();
    });

    document.addEventListener('mouseover', async (event) => {
      if (!state.active) {
        return;
      }
      const target = event.target;
      if (!(target instanceof Element) || isOverlay(target)) {
        return;
      }
      state.target = target;
      const seq = ++state.seq;
      const pointer = pointerOf(event);
      outline(target);
      const reply = await window.__SYNTHESIZE__(target);
      if (seq !== state.seq || !state.active) {
        return;
      }
      if (!reply) {
        hide();
        return;
      }
      tooltip.innerHTML = reply.html;
      tooltip.style.display = 'block';
      const rect = tooltip.getBoundingClientRect();
      state.size = { width: rect.width, height: rect.height };
      await place(pointer);
    }, true);

    document.addEventListener('mouseout', (event) => {
      if (!state.active || event.relatedTarget) {
        return;
      }
      state.target = null;
      state.size = null;
      state.seq += 1;
      hide();
      window.__LEAVE__();
    }, true);

    document.addEventListener('mousemove', (event) => {
      if (!state.active || !state.size || state.moving) {
        return;
      }
      state.moving = true;
      const pointer = pointerOf(event);
      requestAnimationFrame(() => {
        place(pointer).finally(() => {
          state.moving = false;
        });
      });
    }, true);

    window.addEventListener('scroll', () => {
      if (state.active && state.target) {
        outline(state.target);
      }
    }, true);

    document.addEventListener('keydown', (event) => {
      if (!event.altKey || !event.shiftKey) {
        return;
      }
      if (event.code === '__TOGGLE_KEY__') {
        event.preventDefault();
        toggle();
        return;
      }
      const scheme = COPY_KEYS[event.code];
      if (scheme && state.active) {
        event.preventDefault();
        copy(scheme);
      }
    }, true);

    window.__STATE__().then(setActive);
  }

  if (document.readyState === 'loading') {
    document.addEventListener('DOMContentLoaded', install, { once: true });
  } else {
    install();
  }
})();
"""


def build_overlay_script() -> str:
    copy_keys = ", ".join(f"{code}: '{scheme}'" for code, scheme in COPY_KEY_CODES.items())
    replacements = {
        "__MARKER__": OVERLAY_MARKER_ATTR,
        "__COPY_KEYS__": "{ " + copy_keys + " }",
        "__TOGGLE_KEY__": TOGGLE_KEY_CODE,
        "__TOGGLE__": TOGGLE_BINDING,
        "__STATE__": STATE_BINDING,
        "__SYNTHESIZE__": SYNTHESIZE_BINDING,
        "__PLACE__": PLACE_BINDING,
        "__LEAVE__": LEAVE_BINDING,
        "__COPY__": COPY_BINDING,
    }
    script = _OVERLAY_TEMPLATE
    for token, value in replacements.items():
        script = script.replace(token, value)
    return script
