"""Component templates written into the generated project"""

THEME_PROVIDER = """"use client"

import * as React from "react"
import { ThemeProvider as NextThemesProvider } from "next-themes"

export function ThemeProvider({
  children,
  ...props
}: React.ComponentProps<typeof NextThemesProvider>) {
  return <NextThemesProvider {...props}>{children}</NextThemesProvider>
}
"""

MODE_TOGGLE = """"use client"

import * as React from "react"
import { Moon, Sun } from "lucide-react"
import { useTheme } from "next-themes"

import { Button } from "@/components/ui/button"
import {
  DropdownMenu,
  DropdownMenuContent,
  DropdownMenuItem,
  DropdownMenuTrigger,
} from "@/components/ui/dropdown-menu"

export function ModeToggle() {
  const { setTheme } = useTheme()

  return (
    <DropdownMenu>
      <DropdownMenuTrigger asChild>
        <Button variant="outline" size="icon">
          <Sun className="h-[1.2rem] w-[1.2rem] scale-100 rotate-0 transition-all dark:scale-0 dark:-rotate-90" />
          <Moon className="absolute h-[1.2rem] w-[1.2rem] scale-0 rotate-90 transition-all dark:scale-100 dark:rotate-0" />
          <span className="sr-only">Toggle theme</span>
        </Button>
      </DropdownMenuTrigger>
      <DropdownMenuContent align="end">
        <DropdownMenuItem onClick={() => setTheme("light")}>
          Light
        </DropdownMenuItem>
        <DropdownMenuItem onClick={() => setTheme("dark")}>
          Dark
        </DropdownMenuItem>
        <DropdownMenuItem onClick={() => setTheme("system")}>
          System
        </DropdownMenuItem>
      </DropdownMenuContent>
    </DropdownMenu>
  )
}
"""

MOBILE_MENU = """"use client"

import * as React from "react"
import Link from "next/link"
import { Menu, X } from "lucide-react"
import { ModeToggle } from "@/components/mode-toggle"

export function MobileMenu() {
  const [open, setOpen] = React.useState(false)

  return (
    <div className="md:hidden">
      <button
        onClick={() => setOpen(!open)}
        className="p-2 hover:bg-neutral-100 dark:hover:bg-neutral-800 rounded-md"
        aria-label="Toggle menu"
      >
        {open ? <X className="h-5 w-5" /> : <Menu className="h-5 w-5" />}
      </button>

      {open && (
        <>
          <div
            className="fixed inset-0 bg-black/50 z-40"
            onClick={() => setOpen(false)}
          />
          <nav className="fixed top-0 right-0 h-full w-64 bg-white dark:bg-black border-l border-neutral-200 dark:border-neutral-800 p-6 z-50 flex flex-col gap-6">
            <div className="flex items-center justify-between mb-4">
              <h2 className="text-lg font-semibold">Menu</h2>
              <button
                onClick={() => setOpen(false)}
                className="p-2 hover:bg-neutral-100 dark:hover:bg-neutral-800 rounded-md"
                aria-label="Close menu"
              >
                <X className="h-5 w-5" />
              </button>
            </div>

            <Link
              href="/"
              onClick={() => setOpen(false)}
            >
              Home
            </Link>
            <Link
              href="/about"
              onClick={() => setOpen(false)}
            >
              About
            </Link>
            <Link
              href="/contact"
              onClick={() => setOpen(false)}
            >
              Contact
            </Link>
            <Link
              href="/get-started"
              onClick={() => setOpen(false)}
            >
              Get Started
            </Link>

            <div className="mt-auto pt-6 border-t border-neutral-200 dark:border-neutral-800">
              <div className="flex items-center justify-between">
                <span className="text-sm">Theme</span>
                <ModeToggle />
              </div>
            </div>
          </nav>
        </>
      )}
    </div>
  )
}
"""

HEADER = """"use client"

import * as React from "react"
import Link from "next/link"
import { Button } from "@/components/ui/button"
import { ModeToggle } from "@/components/mode-toggle"
import { HoverPrefetchLink } from "@/components/hover-prefetch-link"
import { MobileMenu } from "@/components/mobile-menu"

export function Header() {
  return (
    <header className="bg-white dark:bg-black border-b border-neutral-200 dark:border-neutral-800">
      <div className="container mx-auto px-4 py-4 flex justify-between items-center">
        <Link href="/" className="text-xl font-semibold text-black dark:text-white hover:opacity-80 transition-opacity">
          {process.env.NEXT_PUBLIC_APP_NAME || "0xBasinas"}
        </Link>

        {/* Desktop Navigation */}
        <nav className="hidden md:flex items-center space-x-6">
          <HoverPrefetchLink href="/">
            <span className="text-neutral-600 dark:text-neutral-400 hover:text-black dark:hover:text-white transition-colors">
              Home
            </span>
          </HoverPrefetchLink>
          <HoverPrefetchLink href="/about">
            <span className="text-neutral-600 dark:text-neutral-400 hover:text-black dark:hover:text-white transition-colors">
              About
            </span>
          </HoverPrefetchLink>
          <HoverPrefetchLink href="/contact">
            <span className="text-neutral-600 dark:text-neutral-400 hover:text-black dark:hover:text-white transition-colors">
              Contact
            </span>
          </HoverPrefetchLink>
          <Button asChild variant="outline" className="border-neutral-300 dark:border-neutral-600 text-neutral-700 dark:text-neutral-300 hover:bg-neutral-50 dark:hover:bg-neutral-800">
            <HoverPrefetchLink href="/get-started">
              Get Started
            </HoverPrefetchLink>
          </Button>
          <ModeToggle />
        </nav>

        {/* Mobile Navigation */}
        <MobileMenu />
      </div>
    </header>
  )
}
"""

FOOTER = """"use client"

import * as React from "react"
import { HoverPrefetchLink } from "@/components/hover-prefetch-link"

export function Footer() {
  return (
    <footer className="bg-white dark:bg-black border-t border-neutral-200 dark:border-neutral-800">
      <div className="container mx-auto px-4 py-6">
        <div className="flex flex-col md:flex-row justify-between items-center space-y-4 md:space-y-0">
          <div className="text-center md:text-left">
            <h3 className="text-lg font-semibold text-black dark:text-white">
              {process.env.NEXT_PUBLIC_APP_NAME || "0xBasinas"}
            </h3>
            <p className="text-neutral-600 dark:text-neutral-400 text-sm mt-1">
              &copy; {new Date().getFullYear()} All rights reserved.
            </p>
          </div>
          <nav className="flex space-x-6">
            <HoverPrefetchLink href="/about">
              <span className="text-neutral-600 dark:text-neutral-400 hover:text-black dark:hover:text-white transition-colors text-sm">
                About
              </span>
            </HoverPrefetchLink>
            <HoverPrefetchLink href="/contact">
              <span className="text-neutral-600 dark:text-neutral-400 hover:text-black dark:hover:text-white transition-colors text-sm">
                Contact
              </span>
            </HoverPrefetchLink>
            <HoverPrefetchLink href="/privacy">
              <span className="text-neutral-600 dark:text-neutral-400 hover:text-black dark:hover:text-white transition-colors text-sm">
                Privacy
              </span>
            </HoverPrefetchLink>
            <HoverPrefetchLink href="/terms">
              <span className="text-neutral-600 dark:text-neutral-400 hover:text-black dark:hover:text-white transition-colors text-sm">
                Terms
              </span>
            </HoverPrefetchLink>
          </nav>
        </div>
      </div>
    </footer>
  )
}
"""

HOVER_PREFETCH_LINK = """"use client"

import Link from "next/link"
import { useState } from "react"

export function HoverPrefetchLink({
  href,
  children,
}: {
  href: string
  children: React.ReactNode
}) {
  const [prefetch, setPrefetch] = useState(false)

  return (
    <Link
      href={href}
      prefetch={prefetch}
      onMouseEnter={() => setPrefetch(true)}
    >
      {children}
    </Link>
  )
}
"""

SUSPENSE_WRAPPER = """"use client"

import { Suspense } from "react"
import { Skeleton } from "@/components/ui/skeleton"

export function SuspenseWrapper({
  children,
  fallback = <Skeleton className="h-64 w-full" />
}: {
  children: React.ReactNode
  fallback?: React.ReactNode
}) {
  return (
    <Suspense fallback={fallback}>
      {children}
    </Suspense>
  )
}

export function PageSkeleton() {
  return (
    <div className="container mx-auto px-4 py-16 max-w-2xl">
      <Skeleton className="h-12 w-3/4 mb-6" />
      <Skeleton className="h-4 w-full mb-4" />
      <Skeleton className="h-4 w-full mb-4" />
      <Skeleton className="h-4 w-2/3 mb-8" />
      <Skeleton className="h-32 w-full" />
    </div>
  )
}
"""

STREAMING_LAYOUT = """import { Suspense } from "react"
import { Skeleton } from "@/components/ui/skeleton"

// Server Component - renders fast, no hydration needed
export function StreamingSection({
  children,
  fallback = <Skeleton className="h-32 w-full" />
}: {
  children: React.ReactNode
  fallback?: React.ReactNode
}) {
  return (
    <Suspense fallback={fallback}>
      {children}
    </Suspense>
  )
}

// Use this wrapper for slow data fetches
export function StreamingContent({ children }: { children: React.ReactNode }) {
  return (
    <Suspense fallback={
      <div className="space-y-4">
        <Skeleton className="h-8 w-3/4" />
        <Skeleton className="h-4 w-full" />
        <Skeleton className="h-4 w-full" />
        <Skeleton className="h-4 w-2/3" />
      </div>
    }>
      {children}
    </Suspense>
  )
}
"""

MDX_COMPONENTS = """import type { MDXComponents } from 'mdx/types';
import defaultComponents from 'fumadocs-ui/mdx';

export function useMDXComponents(components: MDXComponents): MDXComponents {
  return {
    ...defaultComponents,
    ...components,
  };
}
"""
