"""In-memory manifest of the generated Next.js project.

:func:`get_project_structure` is pure: it only renders the module level
templates below with values derived from :class:`TemplateVariables`. The
directory materializer writes the result to disk when no external template
directory is available.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Iterator, Mapping

from .config import (
    BACKEND_URL_ENV,
    COOKIES_HEADER_ENV,
    DEFAULT_BACKEND_URL,
    DEFAULT_COOKIES_HEADER,
    TemplateVariables,
)
from .package_manager import get_install_command, get_run_command
from .template import TemplateRenderer

__all__ = [
    "ASSETS_DIR",
    "EMPTY_DIRS",
    "FileEntry",
    "GITKEEP",
    "ProjectStructure",
    "get_project_structure",
]


GITKEEP = ".gitkeep"
ASSETS_DIR = "public"

EMPTY_DIRS: tuple[str, ...] = (
    "src/shared/constants",
    "src/shared/types",
    "src/shared/components/shadcnUi",
    "src/stores",
    "src/tests/e2e",
    "src/tests/unit",
)

PUBLIC_ROUTES: tuple[str, ...] = ("/login", "/register", "/forgot-password", "/processing")

DEPENDENCIES: dict[str, str] = {
    "@hookform/resolvers": "^5.2.2",
    "@tanstack/react-query": "^5.90.20",
    "class-variance-authority": "^0.7.1",
    "clsx": "^2.1.1",
    "lucide-react": "^0.563.0",
    "next": "16.1.6",
    "radix-ui": "^1.4.3",
    "react": "19.2.3",
    "react-dom": "19.2.3",
    "react-hook-form": "^7.71.1",
    "tailwind-merge": "^3.4.0",
    "zod": "^4.3.6",
}

DEV_DEPENDENCIES: dict[str, str] = {
    "@tailwindcss/postcss": "^4",
    "@types/node": "^20",
    "@types/react": "^19",
    "@types/react-dom": "^19",
    "eslint": "^9",
    "eslint-config-next": "16.1.6",
    "tailwindcss": "^4",
    "tw-animate-css": "^1.4.0",
    "typescript": "^5",
}

TSCONFIG: dict[str, Any] = {
    "compilerOptions": {
        "target": "ES2017",
        "lib": ["dom", "dom.iterable", "esnext"],
        "allowJs": True,
        "skipLibCheck": True,
        "strict": True,
        "noEmit": True,
        "esModuleInterop": True,
        "module": "esnext",
        "moduleResolution": "bundler",
        "resolveJsonModule": True,
        "isolatedModules": True,
        "jsx": "react-jsx",
        "incremental": True,
        "plugins": [{"name": "next"}],
        "paths": {"@/*": ["./src/*"]},
    },
    "include": [
        "next-env.d.ts",
        "**/*.ts",
        "**/*.tsx",
        ".next/types/**/*.ts",
        ".next/dev/types/**/*.ts",
        "**/*.mts",
    ],
    "exclude": ["node_modules"],
}


NEXT_CONFIG_TEMPLATE = """import type { NextConfig } from "next";

const BACKEND_URL =
  process.env.{{backendUrlEnv}} || "{{defaultBackendUrl}}";

const nextConfig: NextConfig = {
  async rewrites() {
    return [
      // Proxy API requests to the backend (same origin for cookies)
      {
        source: "/api/v1/:path*",
        destination: `${BACKEND_URL}/api/v1/:path*`,
      },
      {
        source: "/api/auth/:path*",
        destination: `${BACKEND_URL}/api/auth/:path*`,
      },
    ];
  },
};

export default nextConfig;
"""

ESLINT_CONFIG_TEMPLATE = """import { defineConfig, globalIgnores } from "eslint/config";
import nextVitals from "eslint-config-next/core-web-vitals";
import nextTs from "eslint-config-next/typescript";

const eslintConfig = defineConfig([
  ...nextVitals,
  ...nextTs,
  globalIgnores([
    ".next/**",
    "out/**",
    "build/**",
    "next-env.d.ts",
  ]),
]);

export default eslintConfig;
"""

POSTCSS_CONFIG_TEMPLATE = """const config = {
  plugins: {
    "@tailwindcss/postcss": {},
  },
};

export default config;
"""

README_TEMPLATE = """# {{projectName}}

This is a [Next.js](https://nextjs.org) project bootstrapped with next-scaffold.

## Getting Started

First, install dependencies:

```bash
{{installCommand}}
```

Then, run the development server:

```bash
{{devCommand}}
```

Open [http://localhost:3000](http://localhost:3000) with your browser to see the result.

Copy `src/config/.env.example` to `.env.local` and point `{{backendUrlEnv}}` at your API.

## Project Structure

```
src/
  app/              # Next.js app directory
  config/           # Configuration files
  features/         # Feature-based modules
  shared/           # Shared utilities and components
  stores/           # State management
  styles/           # Global styles
  tests/            # Test files
```

## Learn More

- [Next.js Documentation](https://nextjs.org/docs) - learn about Next.js features and API.
- [Learn Next.js](https://nextjs.org/learn) - an interactive Next.js tutorial.
"""

LAYOUT_TEMPLATE = """import type { Metadata } from "next";
import { Geist, Geist_Mono } from "next/font/google";
import "../styles/globals.css";
import AppProviders from "./providers";

const geistSans = Geist({
  variable: "--font-geist-sans",
  subsets: ["latin"],
});

const geistMono = Geist_Mono({
  variable: "--font-geist-mono",
  subsets: ["latin"],
});

export const metadata: Metadata = {
  title: "{{projectName}}",
  description: "Generated by next-scaffold",
};

export default function RootLayout({
  children,
}: Readonly<{
  children: React.ReactNode;
}>) {
  return (
    <html lang="en">
      <body
        className={`${geistSans.variable} ${geistMono.variable} antialiased`}
      >
        <AppProviders>{children}</AppProviders>
      </body>
    </html>
  );
}
"""

# One query client per provider instance, never at module scope.
PROVIDERS_TEMPLATE = """'use client'

import { useState } from "react";
import { QueryClient, QueryClientProvider } from "@tanstack/react-query";

export default function AppProviders({ children }: { children: React.ReactNode }) {
  const [queryClient] = useState(() => new QueryClient());

  return (
    <QueryClientProvider client={queryClient}>
      {children}
    </QueryClientProvider>
  );
}
"""

PAGE_TEMPLATE = """import CodeBlock from "@/shared/components/CodeBlock";

const COMMANDS = {
  install: "{{installCommand}}",
  dev: "{{devCommand}}",
} as const;

export default function Home() {
  return (
    <div className="min-h-screen bg-gradient-to-br from-zinc-50 via-white to-zinc-100 font-sans dark:from-black dark:via-zinc-950 dark:to-zinc-900">
      <main className="mx-auto flex max-w-3xl flex-col items-center justify-center px-4 py-24 text-center">
        <h1 className="mb-6 text-5xl font-bold tracking-tight text-zinc-900 dark:text-zinc-50">
          {{projectName}}
        </h1>
        <p className="mb-12 text-lg text-zinc-600 dark:text-zinc-400">
          Feature-based Next.js starter. Edit <code>src/app/page.tsx</code> to get going.
        </p>
        <div className="w-full space-y-3 rounded-xl border border-zinc-800 bg-zinc-900 p-4 text-left shadow-2xl">
          <CodeBlock command={COMMANDS.install} />
          <CodeBlock command={COMMANDS.dev} />
        </div>
      </main>
    </div>
  );
}
"""

GLOBALS_CSS_TEMPLATE = """@import "tailwindcss";
@import "tw-animate-css";

@custom-variant dark (&:is(.dark *));

@theme inline {
  --color-background: var(--background);
  --color-foreground: var(--foreground);
  --font-sans: var(--font-geist-sans);
  --font-mono: var(--font-geist-mono);
  --color-sidebar-ring: var(--sidebar-ring);
  --color-sidebar-border: var(--sidebar-border);
  --color-sidebar-accent-foreground: var(--sidebar-accent-foreground);
  --color-sidebar-accent: var(--sidebar-accent);
  --color-sidebar-primary-foreground: var(--sidebar-primary-foreground);
  --color-sidebar-primary: var(--sidebar-primary);
  --color-sidebar-foreground: var(--sidebar-foreground);
  --color-sidebar: var(--sidebar);
  --color-chart-5: var(--chart-5);
  --color-chart-4: var(--chart-4);
  --color-chart-3: var(--chart-3);
  --color-chart-2: var(--chart-2);
  --color-chart-1: var(--chart-1);
  --color-ring: var(--ring);
  --color-input: var(--input);
  --color-border: var(--border);
  --color-destructive: var(--destructive);
  --color-accent-foreground: var(--accent-foreground);
  --color-accent: var(--accent);
  --color-muted-foreground: var(--muted-foreground);
  --color-muted: var(--muted);
  --color-secondary-foreground: var(--secondary-foreground);
  --color-secondary: var(--secondary);
  --color-primary-foreground: var(--primary-foreground);
  --color-primary: var(--primary);
  --color-popover-foreground: var(--popover-foreground);
  --color-popover: var(--popover);
  --color-card-foreground: var(--card-foreground);
  --color-card: var(--card);
  --radius-sm: calc(var(--radius) - 4px);
  --radius-md: calc(var(--radius) - 2px);
  --radius-lg: var(--radius);
  --radius-xl: calc(var(--radius) + 4px);
}

:root {
  --radius: 0.625rem;
  --background: oklch(1 0 0);
  --foreground: oklch(0.145 0 0);
  --card: oklch(1 0 0);
  --card-foreground: oklch(0.145 0 0);
  --popover: oklch(1 0 0);
  --popover-foreground: oklch(0.145 0 0);
  --primary: oklch(0.205 0 0);
  --primary-foreground: oklch(0.985 0 0);
  --secondary: oklch(0.97 0 0);
  --secondary-foreground: oklch(0.205 0 0);
  --muted: oklch(0.97 0 0);
  --muted-foreground: oklch(0.556 0 0);
  --accent: oklch(0.97 0 0);
  --accent-foreground: oklch(0.205 0 0);
  --destructive: oklch(0.577 0.245 27.325);
  --border: oklch(0.922 0 0);
  --input: oklch(0.922 0 0);
  --ring: oklch(0.708 0 0);
  --chart-1: oklch(0.646 0.222 41.116);
  --chart-2: oklch(0.6 0.118 184.704);
  --chart-3: oklch(0.398 0.07 227.392);
  --chart-4: oklch(0.828 0.189 84.429);
  --chart-5: oklch(0.769 0.188 70.08);
  --sidebar: oklch(0.985 0 0);
  --sidebar-foreground: oklch(0.145 0 0);
  --sidebar-primary: oklch(0.205 0 0);
  --sidebar-primary-foreground: oklch(0.985 0 0);
  --sidebar-accent: oklch(0.97 0 0);
  --sidebar-accent-foreground: oklch(0.205 0 0);
  --sidebar-border: oklch(0.922 0 0);
  --sidebar-ring: oklch(0.708 0 0);
}

.dark {
  --background: oklch(0.145 0 0);
  --foreground: oklch(0.985 0 0);
  --card: oklch(0.205 0 0);
  --card-foreground: oklch(0.985 0 0);
  --popover: oklch(0.205 0 0);
  --popover-foreground: oklch(0.985 0 0);
  --primary: oklch(0.922 0 0);
  --primary-foreground: oklch(0.205 0 0);
  --secondary: oklch(0.269 0 0);
  --secondary-foreground: oklch(0.985 0 0);
  --muted: oklch(0.269 0 0);
  --muted-foreground: oklch(0.708 0 0);
  --accent: oklch(0.269 0 0);
  --accent-foreground: oklch(0.985 0 0);
  --destructive: oklch(0.704 0.191 22.216);
  --border: oklch(1 0 0 / 10%);
  --input: oklch(1 0 0 / 15%);
  --ring: oklch(0.556 0 0);
  --chart-1: oklch(0.488 0.243 264.376);
  --chart-2: oklch(0.696 0.17 162.48);
  --chart-3: oklch(0.769 0.188 70.08);
  --chart-4: oklch(0.627 0.265 303.9);
  --chart-5: oklch(0.645 0.246 16.439);
  --sidebar: oklch(0.205 0 0);
  --sidebar-foreground: oklch(0.985 0 0);
  --sidebar-primary: oklch(0.488 0.243 264.376);
  --sidebar-primary-foreground: oklch(0.985 0 0);
  --sidebar-accent: oklch(0.269 0 0);
  --sidebar-accent-foreground: oklch(0.985 0 0);
  --sidebar-border: oklch(1 0 0 / 10%);
  --sidebar-ring: oklch(0.556 0 0);
}

@layer base {
  * {
    @apply border-border outline-ring/50;
  }
  body {
    @apply bg-background text-foreground;
  }
}
"""

ROUTES_TEMPLATE = """export const routes = {
  home: "/",
};
"""

ENV_EXAMPLE_TEMPLATE = """# Backend API URL
{{backendUrlEnv}}={{defaultBackendUrl}}

# Cookie name holding the session token
{{cookiesHeaderEnv}}={{defaultCookiesHeader}}
"""

PROXY_TEMPLATE = """import { NextRequest, NextResponse } from "next/server";
import { checkTokenExpiration } from "./shared/utils/checkTokenExpiration";

const publicRoutes = {{publicRoutes}};
const cookieHeader = process.env.{{cookiesHeaderEnv}} || "{{defaultCookiesHeader}}";

export function proxy(request: NextRequest) {
  const { pathname } = request.nextUrl;

  const sessionData = request.cookies.get(cookieHeader);
  const isTokenExpired = checkTokenExpiration(sessionData?.value || "");
  const hasValidSession = sessionData?.value && !isTokenExpired;

  // Signed-in users have no business on the auth pages
  if (publicRoutes.includes(pathname)) {
    if (hasValidSession) {
      return NextResponse.redirect(new URL("/", request.url));
    }
    return NextResponse.next();
  }

  if (!hasValidSession) {
    return NextResponse.redirect(new URL("/login", request.url));
  }

  return NextResponse.next();
}

export const config = {
  matcher: ["/((?!_next/static|_next/image|favicon.ico|api).*)"],
};
"""

CODE_BLOCK_TEMPLATE = """'use client'

import { useState } from "react";

interface CodeBlockProps {
  command: string;
  className?: string;
}

export default function CodeBlock({ command, className = "" }: CodeBlockProps) {
  const [copied, setCopied] = useState(false);

  const handleCopy = async () => {
    try {
      await navigator.clipboard.writeText(command);
      setCopied(true);
      setTimeout(() => setCopied(false), 2000);
    } catch (err) {
      console.error("Failed to copy:", err);
    }
  };

  return (
    <div className={`group relative flex items-center ${className}`}>
      <code
        className="flex w-full cursor-pointer items-center justify-between text-sm"
        onClick={handleCopy}
      >
        <span className="text-zinc-500">
          $ <span className="font-mono text-zinc-100">{command}</span>
        </span>
        <button
          className="rounded-md border border-zinc-700/50 bg-zinc-800/90 px-2.5 py-1 text-xs text-zinc-300 opacity-0 transition group-hover:opacity-100"
          onClick={handleCopy}
          aria-label="Copy command"
        >
          {copied ? "Copied!" : "Copy"}
        </button>
      </code>
    </div>
  );
}
"""

UTILS_TEMPLATE = """import { clsx, type ClassValue } from "clsx";
import { twMerge } from "tailwind-merge";

export function cn(...inputs: ClassValue[]) {
  return twMerge(clsx(inputs));
}
"""

API_SERVICE_TEMPLATE = """interface ApiResponse<T> {
  response: number;
  success: string;
  error: string | null;
  data: T;
}

const defaultHeaders: Record<string, string> = {
  "Content-Type": "application/json",
};

async function parseResponse<T>(res: Response): Promise<ApiResponse<T>> {
  return res.json();
}

async function request<T>(
  url: string,
  options?: RequestInit,
): Promise<ApiResponse<T>> {
  const res = await fetch(url, {
    headers: defaultHeaders,
    credentials: "include",
    ...options,
  });
  if (res.status === 401 && typeof window !== "undefined") {
    window.location.href = "/login";
  }
  if (!res.ok) {
    throw await parseResponse<T>(res);
  }
  return parseResponse<T>(res);
}

export const api = {
  get: <T>(url: string) => request<T>(url, { method: "GET" }),
  post: <T>(url: string, body?: unknown) =>
    request<T>(url, { method: "POST", body: JSON.stringify(body) }),
  put: <T>(url: string, body?: unknown) =>
    request<T>(url, { method: "PUT", body: JSON.stringify(body) }),
  patch: <T>(url: string, body?: unknown) =>
    request<T>(url, { method: "PATCH", body: JSON.stringify(body) }),
  delete: <T>(url: string) => request<T>(url, { method: "DELETE" }),
};
"""

USE_FORM_WITH_ZOD_TEMPLATE = """import { useForm, FieldValues } from "react-hook-form";
import { zodResolver } from "@hookform/resolvers/zod";
import { z } from "zod";

export function useFormWithZod<T extends FieldValues>(schema: z.ZodSchema<T>) {
  return useForm<T>({
    // @ts-expect-error - zodResolver typings lag behind Zod v4
    resolver: zodResolver(schema),
  });
}
"""

CHECK_TOKEN_EXPIRATION_TEMPLATE = """export const checkTokenExpiration = (token: string) => {
  if (!token) return true;
  // Decode the token here and compare its expiry with Date.now()
  return false;
};
"""

AUTH_TYPE_TEMPLATE = """export interface LoginPayload {
  email: string;
  password: string;
}

export interface SignupPayload {
  name: string;
  email: string;
  password: string;
}
"""

AUTH_API_TEMPLATE = """import { api } from "@/shared/libs/api.service";
import { LoginPayload, SignupPayload } from "./auth.type";

export const authApi = {
  login: (body: LoginPayload) => api.post("/api/auth/login", body),
  signup: (body: SignupPayload) => api.post("/api/auth/signup", body),
};
"""

AUTH_SERVICE_TEMPLATE = """import { LoginPayload, SignupPayload } from "./auth.type";
import { authApi } from "./auth.api";
import { loginSchema, signupSchema } from "./auth.validation";

export const authService = {
  async login(payload: LoginPayload) {
    loginSchema.parse(payload);
    return authApi.login(payload);
  },

  async signup(payload: SignupPayload) {
    signupSchema.parse(payload);
    return authApi.signup(payload);
  },
};
"""

AUTH_VALIDATION_TEMPLATE = """import { z } from "zod";

export const loginSchema = z.object({
  email: z.string().email(),
  password: z.string().min(5).max(30),
});

export type LoginSchemaT = z.infer<typeof loginSchema>;

export const signupSchema = z.object({
  name: z.string(),
  email: z.string().email(),
  password: z.string().min(5).max(30),
});

export type SignupSchemaT = z.infer<typeof signupSchema>;
"""

AUTH_STORE_TEMPLATE = """// Auth store: add client state for the auth feature here
"""

USE_AUTH_TEMPLATE = """import { useMutation, useQueryClient } from "@tanstack/react-query";
import { authService } from "../auth.service";

export const useAuth = () => {
  const queryClient = useQueryClient();

  const loginMutation = useMutation({
    mutationFn: authService.login,
    onSuccess: () => {
      queryClient.invalidateQueries({ queryKey: ["user"] });
    },
  });

  const signupMutation = useMutation({
    mutationFn: authService.signup,
    onSuccess: () => {
      queryClient.invalidateQueries({ queryKey: ["user"] });
    },
  });

  return {
    loginMutation,
    signupMutation,
  };
};
"""

LOGIN_FORM_TEMPLATE = """export default function LoginForm() {
  return <div>{/* Login form goes here */}</div>;
}
"""

GITIGNORE_TEMPLATE = """# dependencies
/node_modules
/.pnp
.pnp.js

# testing
/coverage

# next.js
/.next/
/out/

# production
/build

# misc
.DS_Store
*.pem

# debug
npm-debug.log*
yarn-debug.log*
yarn-error.log*

# env files
.env
.env.local
.env.development
.env.development.local
.env.test
.env.test.local
.env.production
.env.production.local

# vercel
.vercel

# typescript
*.tsbuildinfo
next-env.d.ts
"""

NEXT_ENV_TEMPLATE = """/// <reference types="next" />
/// <reference types="next/image-types/global" />

// NOTE: This file should not be edited
// see https://nextjs.org/docs/basic-features/typescript for more information.
"""

_TEMPLATES: tuple[tuple[str, str], ...] = (
    ("next.config.ts", NEXT_CONFIG_TEMPLATE),
    ("eslint.config.mjs", ESLINT_CONFIG_TEMPLATE),
    ("postcss.config.mjs", POSTCSS_CONFIG_TEMPLATE),
    ("README.md", README_TEMPLATE),
    ("src/app/layout.tsx", LAYOUT_TEMPLATE),
    ("src/app/providers.tsx", PROVIDERS_TEMPLATE),
    ("src/app/page.tsx", PAGE_TEMPLATE),
    ("src/styles/globals.css", GLOBALS_CSS_TEMPLATE),
    ("src/config/routes.ts", ROUTES_TEMPLATE),
    ("src/config/.env.example", ENV_EXAMPLE_TEMPLATE),
    ("src/proxy.ts", PROXY_TEMPLATE),
    ("src/shared/components/CodeBlock.tsx", CODE_BLOCK_TEMPLATE),
    ("src/shared/libs/utils.ts", UTILS_TEMPLATE),
    ("src/shared/libs/api.service.ts", API_SERVICE_TEMPLATE),
    ("src/shared/hooks/useFormWithZod.ts", USE_FORM_WITH_ZOD_TEMPLATE),
    ("src/shared/utils/checkTokenExpiration.ts", CHECK_TOKEN_EXPIRATION_TEMPLATE),
    ("src/features/auth/auth.type.ts", AUTH_TYPE_TEMPLATE),
    ("src/features/auth/auth.api.ts", AUTH_API_TEMPLATE),
    ("src/features/auth/auth.service.ts", AUTH_SERVICE_TEMPLATE),
    ("src/features/auth/auth.validation.ts", AUTH_VALIDATION_TEMPLATE),
    ("src/features/auth/auth.store.ts", AUTH_STORE_TEMPLATE),
    ("src/features/auth/hooks/useAuth.ts", USE_AUTH_TEMPLATE),
    ("src/features/auth/components/LoginForm.tsx", LOGIN_FORM_TEMPLATE),
    (".gitignore", GITIGNORE_TEMPLATE),
    ("next-env.d.ts", NEXT_ENV_TEMPLATE),
)


@dataclass(frozen=True, slots=True)
class FileEntry:
    """A file of the generated project, addressed by a POSIX relative path."""

    path: str
    content: str


@dataclass(frozen=True, slots=True)
class ProjectStructure:
    """The full intended output tree: files plus directories kept empty."""

    files: tuple[FileEntry, ...]
    empty_dirs: tuple[str, ...] = EMPTY_DIRS

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for entry in self.files:
            if entry.path in seen:
                raise ValueError(f"duplicate manifest path '{entry.path}'")
            seen.add(entry.path)

    def __iter__(self) -> Iterator[FileEntry]:
        return iter(self.files)

    def __len__(self) -> int:
        return len(self.files)

    def get(self, path: str) -> FileEntry | None:
        for entry in self.files:
            if entry.path == path:
                return entry
        return None

    def paths(self) -> list[str]:
        return [entry.path for entry in self.files]


def _dump_json(payload: Mapping[str, Any]) -> str:
    return json.dumps(payload, indent=2)


def _package_json(variables: TemplateVariables) -> str:
    return _dump_json(
        {
            "name": variables.project_name,
            "version": "0.1.0",
            "private": True,
            "scripts": {
                "dev": "next dev",
                "build": "next build",
                "start": "next start",
                "lint": "eslint",
            },
            "dependencies": DEPENDENCIES,
            "devDependencies": DEV_DEPENDENCIES,
        }
    )


def _template_context(variables: TemplateVariables) -> dict[str, str]:
    manager = variables.package_manager
    return {
        "projectName": variables.project_name,
        "packageManager": manager.value,
        "installCommand": get_install_command(manager),
        "devCommand": get_run_command(manager, "dev"),
        "backendUrlEnv": BACKEND_URL_ENV,
        "defaultBackendUrl": DEFAULT_BACKEND_URL,
        "cookiesHeaderEnv": COOKIES_HEADER_ENV,
        "defaultCookiesHeader": DEFAULT_COOKIES_HEADER,
        "publicRoutes": json.dumps(list(PUBLIC_ROUTES)),
    }


def get_project_structure(variables: TemplateVariables) -> ProjectStructure:
    """Return every file and empty directory of the generated project.

    Identical ``variables`` always produce identical output; nothing here
    touches the filesystem.
    """

    renderer = TemplateRenderer(strict=True)
    context = _template_context(variables)

    files = [
        FileEntry("package.json", _package_json(variables)),
        FileEntry("tsconfig.json", _dump_json(TSCONFIG)),
    ]
    files.extend(
        FileEntry(path, renderer.render_string(template, context))
        for path, template in _TEMPLATES
    )
    return ProjectStructure(files=tuple(files), empty_dirs=EMPTY_DIRS)
