"""Single-page demo UI served at the site root."""

DEMO_PAGE_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Genesis Voice</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; }
      h1 { margin-bottom: 0.5rem; }
      .row { margin-bottom: 1rem; }
      input, select, textarea { padding: 0.4rem 0.6rem; width: 360px; }
      button { padding: 0.4rem 0.8rem; margin-right: 0.5rem; }
      pre { background: #f6f6f6; padding: 1rem; overflow: auto; }
    </style>
  </head>
  <body>
    <h1>Genesis Voice</h1>
    <div class="row">
      <input id="email" type="email" placeholder="Email" />
      <input id="password" type="password" placeholder="Password" />
      <button onclick="login()">Login</button>
      <button onclick="send('POST', '/api/logout')">Logout</button>
    </div>
    <div class="row">
      <select id="language" onchange="loadVoices()">
        <option value="ko">한국어</option>
        <option value="en">English</option>
        <option value="ja">日本語</option>
        <option value="es">Español</option>
        <option value="pt">Português</option>
      </select>
      <select id="voice"></select>
      <button onclick="preview()">Preview</button>
    </div>
    <div class="row">
      <textarea id="text" rows="4" placeholder="Enter the text you want to convert to speech..."></textarea>
    </div>
    <div class="row">
      <button onclick="generate()">Generate Voice</button>
      <button onclick="send('DELETE', '/api/generate')">Cancel</button>
      <button onclick="send('GET', '/api/dashboard')">Dashboard</button>
      <button onclick="send('GET', '/api/pricing')">Pricing</button>
    </div>
    <audio id="player" controls></audio>
    <pre id="output">Ready.</pre>
    <script>
      const output = document.getElementById('output');

      async function send(method, path, body) {
        const res = await fetch(path, {
          method,
          headers: { 'Content-Type': 'application/json' },
          body: body ? JSON.stringify(body) : undefined
        });
        const data = await res.json();
        output.textContent = JSON.stringify(data, null, 2);
        return { ok: res.ok, data };
      }

      async function login() {
        await send('POST', '/api/login', {
          email: document.getElementById('email').value,
          password: document.getElementById('password').value
        });
      }

      async function loadVoices() {
        const language = document.getElementById('language').value;
        const res = await fetch('/api/home?language=' + language);
        const data = await res.json();
        const select = document.getElementById('voice');
        select.innerHTML = '';
        (data.voices || []).forEach(v => {
          const option = document.createElement('option');
          option.value = v.voice_id;
          option.textContent = v.name + ' (' + v.gender + ')';
          select.appendChild(option);
        });
      }

      async function preview() {
        const voiceId = document.getElementById('voice').value;
        const { ok, data } = await send('GET', '/api/voices/' + voiceId + '/sample');
        if (ok) { play(data.audio_url); }
      }

      function play(url) {
        const player = document.getElementById('player');
        player.src = url;
        player.play();
      }

      async function generate() {
        const { ok } = await send('POST', '/api/generate', {
          text: document.getElementById('text').value,
          voice_id: document.getElementById('voice').value,
          language: document.getElementById('language').value
        });
        if (!ok) { return; }
        const timer = setInterval(async () => {
          const { data } = await send('GET', '/api/generate');
          if (data.outcome) {
            clearInterval(timer);
            if (data.outcome.result_url) { play(data.outcome.result_url); }
          }
        }, 1000);
      }

      loadVoices();
    </script>
  </body>
</html>
"""
